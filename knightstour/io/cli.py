"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Tuple, Union

from ..core.dispatch import EXECUTOR_KINDS, count_by_start, enumerate_by_start
from ..core.errors import ConfigurationError, OutOfBoundsError, ParseError, SearchCancelled
from ..core.model import Board
from ..log import init_logger
from .parser import Job, load_job

DEFAULT_WIDTH, DEFAULT_HEIGHT = 4, 5

logger = logging.getLogger(__name__)


def _square(text: str) -> Union[str, Tuple[int, int]]:
    """``"b3"`` stays a label; ``"1,2"`` becomes the pair ``(1, 2)``."""
    if "," not in text:
        return text
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a label like b3 or a pair like 1,2: {text!r}") from exc
    return x, y


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate every knight's tour on a rectangular board")
    ap.add_argument("job", nargs="?", type=Path, help="Path to a job YAML file")
    ap.add_argument("--width", type=int, help=f"Board width (default {DEFAULT_WIDTH})")
    ap.add_argument("--height", type=int, help=f"Board height (default {DEFAULT_HEIGHT})")
    ap.add_argument(
        "-s", "--start",
        dest="starts",
        action="append",
        type=_square,
        help="Starting square as a label (a1) or x,y pair; repeatable. Default: every square",
    )
    ap.add_argument("--executor", choices=EXECUTOR_KINDS, help="How to run the per-square searches")
    ap.add_argument("--workers", type=int, help="Number of parallel workers")
    ap.add_argument("--timeout", type=float, help="Give up after this many seconds")
    ap.add_argument("--count", action="store_true", help="Print only the number of tours per starting square")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)")
    ap.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return ap


def _resolve_job(args: argparse.Namespace) -> Job:
    job = load_job(args.job) if args.job else Job(board=Board(DEFAULT_WIDTH, DEFAULT_HEIGHT))
    if args.width is not None or args.height is not None:
        job.board = Board(
            args.width if args.width is not None else job.board.width,
            args.height if args.height is not None else job.board.height,
        )
        job.starts = None
    if args.starts:
        job.starts = args.starts
    if args.executor:
        job.executor = args.executor
    if args.workers is not None:
        job.workers = args.workers
    if args.timeout is not None:
        job.timeout = args.timeout
    return job


def main(argv: List[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    init_logger(
        level=(logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)],
        log_file=args.log_file,
    )

    try:
        job = _resolve_job(args)
        run = count_by_start if args.count else enumerate_by_start
        groups = run(
            job.board,
            job.starts,
            executor=job.executor,
            workers=job.workers,
            timeout=job.timeout,
        )
    except (ConfigurationError, OutOfBoundsError, ParseError) as exc:
        ap.error(str(exc))
    except SearchCancelled as exc:
        logger.warning("Search cancelled: %s", exc)
        raise SystemExit(f"Timed out: {exc}") from exc

    if args.count:
        for start, n in groups:
            print(f"{start.label}: {n}")
        total = sum(n for _, n in groups)
    else:
        for _, tours in groups:
            for tour in tours:
                print(tour)
        total = sum(len(tours) for _, tours in groups)
    print(f"\nSize: {total}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

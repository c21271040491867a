"""Fan the search out over many starting squares and join the results.

Each starting square is an independent unit of work: it builds its own
:class:`~knightstour.core.search.Path`, reads the shared immutable board,
and returns its tours. Results are joined in the order the starting
squares were given, whatever order the workers finish in.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from .errors import ConfigurationError
from .model import Board, Position, SquareLike, Tour
from .search import StopCheck, count_tours, search

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXECUTORS: Dict[str, Type[Executor]] = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}
EXECUTOR_KINDS = ("serial", *EXECUTORS)


def _deadline_check(deadline: Optional[float]) -> Optional[StopCheck]:
    if deadline is None:
        return None
    return lambda: time.time() >= deadline


def _search_task(board: Board, start: Position, deadline: Optional[float]) -> List[Tour]:
    return search(start, board, _deadline_check(deadline))


def _count_task(board: Board, start: Position, deadline: Optional[float]) -> int:
    return count_tours(start, board, _deadline_check(deadline))


def resolve_starts(board: Board, starts: Optional[Iterable[SquareLike]] = None) -> List[Position]:
    """Validate requested starting squares; ``None`` means every square."""
    if starts is None:
        return list(board.squares())
    return [Position.parse(s, board) for s in starts]


def _check_options(executor: str, workers: Optional[int], timeout: Optional[float]) -> None:
    if executor not in EXECUTOR_KINDS:
        raise ConfigurationError(
            f"Unknown executor {executor!r}; expected one of {', '.join(EXECUTOR_KINDS)}"
        )
    if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers <= 0):
        raise ConfigurationError(f"Worker count must be a positive integer, got {workers!r}")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        raise ConfigurationError(f"Timeout must be a positive number of seconds, got {timeout!r}")


def _fan_out(
    task: Callable[[Board, Position, Optional[float]], T],
    board: Board,
    starts: Optional[Iterable[SquareLike]],
    executor: str,
    workers: Optional[int],
    timeout: Optional[float],
) -> List[Tuple[Position, T]]:
    _check_options(executor, workers, timeout)
    positions = resolve_starts(board, starts)
    if not positions:
        return []
    deadline = None if timeout is None else time.time() + timeout

    if executor == "serial":
        logger.info("Searching %d start square(s) serially", len(positions))
        results = [task(board, p, deadline) for p in positions]
    else:
        max_workers = min(workers or os.cpu_count() or 1, len(positions))
        logger.info(
            "Dispatching %d start square(s) to %d %s worker(s)",
            len(positions), max_workers, executor,
        )
        pool = EXECUTORS[executor](max_workers=max_workers)
        try:
            futures = [pool.submit(task, board, p, deadline) for p in positions]
            results = [f.result() for f in futures]
        except BaseException:
            # report the first failure now; units still running are abandoned
            pool.shutdown(wait=False, cancel_futures=True)
            raise
        pool.shutdown()
    logger.info("Joined results from %d start square(s)", len(results))
    return list(zip(positions, results))


def enumerate_by_start(
    board: Board,
    starts: Optional[Iterable[SquareLike]] = None,
    *,
    executor: str = "process",
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[Tuple[Position, List[Tour]]]:
    """Run one search per starting square; one ``(start, tours)`` pair each."""
    return _fan_out(_search_task, board, starts, executor, workers, timeout)


def enumerate_all(
    board: Board,
    starts: Optional[Iterable[SquareLike]] = None,
    *,
    executor: str = "process",
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[Tour]:
    """Every tour from every starting square, grouped in ``starts`` order."""
    groups = enumerate_by_start(board, starts, executor=executor, workers=workers, timeout=timeout)
    return [tour for _, tours in groups for tour in tours]


def count_by_start(
    board: Board,
    starts: Optional[Iterable[SquareLike]] = None,
    *,
    executor: str = "process",
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[Tuple[Position, int]]:
    """Like :func:`enumerate_by_start` but keeps only the number of tours."""
    return _fan_out(_count_task, board, starts, executor, workers, timeout)

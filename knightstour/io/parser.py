from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.dispatch import resolve_starts
from ..core.errors import ConfigurationError
from ..core.model import Board, SquareLike


@dataclass
class Job:
    board: Board
    starts: Optional[List[SquareLike]] = None
    executor: str = "process"
    workers: Optional[int] = None
    timeout: Optional[float] = None
    options: Dict[str, Any] = field(default_factory=dict)


def load_job(path: str | Path) -> Job:
    """Load a YAML job description into a Job object.

    Board dimensions, starting squares and the shape of ``options`` are
    validated here, so a bad file fails before any search is started.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("board"), dict):
        raise ConfigurationError(f"{path}: expected a mapping with a 'board' section")
    try:
        width, height = data["board"]["width"], data["board"]["height"]
    except KeyError as exc:
        raise ConfigurationError(f"{path}: board needs 'width' and 'height'") from exc

    # Board rejects floats, bools and strings itself
    board = Board(width, height)

    raw_starts = data.get("starts")
    if isinstance(raw_starts, str):
        raw_starts = [raw_starts]
    if raw_starts is not None and not isinstance(raw_starts, list):
        raise ConfigurationError(f"{path}: 'starts' must be a square or a list of squares, got {raw_starts!r}")
    starts = None if raw_starts is None else resolve_starts(board, raw_starts)

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise ConfigurationError(f"{path}: 'options' must be a mapping, got {options!r}")

    return Job(
        board=board,
        starts=starts,
        executor=options.get("executor", "process"),
        workers=options.get("workers"),
        timeout=options.get("timeout"),
        options=options,
    )

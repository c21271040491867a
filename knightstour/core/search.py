"""Backtracking enumeration of every knight's tour from one square.

The search is depth first but keeps its own stack of frames instead of
recursing, so boards with more squares than the interpreter's recursion
limit are still explored. Frame ``i`` holds the neighbours of
``path[i]`` that have not been tried yet.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

from .constraints import check_tour
from .errors import SearchCancelled, TourIntegrityError
from .model import Board, Position, Tour
from .moves import neighbors

logger = logging.getLogger(__name__)

StopCheck = Callable[[], bool]


class Path:
    """The knight's current history plus a set for O(1) membership tests.

    Owned by exactly one search; never shared between workers.
    """

    def __init__(self, start: Position) -> None:
        self.squares: List[Position] = [start]
        self.visited = {start}

    def __len__(self) -> int:
        return len(self.squares)

    def __contains__(self, pos: Position) -> bool:
        return pos in self.visited

    @property
    def current(self) -> Position:
        return self.squares[-1]

    def advance(self, pos: Position) -> None:
        if pos in self.visited:
            raise TourIntegrityError(f"Square {pos} entered twice")
        self.squares.append(pos)
        self.visited.add(pos)

    def retreat(self) -> Position:
        pos = self.squares.pop()
        self.visited.remove(pos)
        return pos

    def unwind(self) -> None:
        while self.squares:
            self.retreat()

    def snapshot(self) -> Tour:
        return Tour(tuple(self.squares))


def iter_tours(start: Position, board: Board, should_stop: Optional[StopCheck] = None) -> Iterator[Tour]:
    """Yield every tour beginning at ``start``, in move-generator order.

    ``should_stop`` is polled before each step; once it returns true the
    search raises :class:`SearchCancelled`.
    """
    board.position(start.x, start.y)
    target = board.area
    path = Path(start)
    frames: List[Iterator[Position]] = [iter(neighbors(start, board))]
    try:
        while frames:
            if should_stop is not None and should_stop():
                logger.warning("Search from %s cancelled at depth %d", start, len(path))
                raise SearchCancelled(f"Search from {start} cancelled at depth {len(path)}")

            if len(path) == target:
                yield check_tour(path.snapshot(), board, start)
                path.retreat()
                frames.pop()
                continue

            for nxt in frames[-1]:
                if nxt not in path:
                    break
            else:
                # dead end, or every branch below here already explored
                path.retreat()
                frames.pop()
                continue

            path.advance(nxt)
            frames.append(iter(neighbors(nxt, board)))
    finally:
        path.unwind()


def search(start: Position, board: Board, should_stop: Optional[StopCheck] = None) -> List[Tour]:
    """Return all tours from ``start`` (possibly none)."""
    logger.debug("Searching %dx%d board from %s", board.width, board.height, start)
    tours = list(iter_tours(start, board, should_stop))
    logger.debug("Found %d tour(s) from %s", len(tours), start)
    return tours


def count_tours(start: Position, board: Board, should_stop: Optional[StopCheck] = None) -> int:
    return sum(1 for _ in iter_tours(start, board, should_stop))

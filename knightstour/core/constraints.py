"""Structural checks every recorded tour must pass."""

from __future__ import annotations

from typing import Callable, Dict, List

from .errors import TourIntegrityError
from .model import Board, Position, Tour
from .moves import is_knight_move

Constraint = Callable[[Tour, Board], bool]


def covers_board(tour: Tour, board: Board) -> bool:
    return len(tour) == board.area


def all_distinct(tour: Tour, board: Board) -> bool:
    return len(set(tour.squares)) == len(tour)


def within_bounds(tour: Tour, board: Board) -> bool:
    return all(board.in_bounds(sq.x, sq.y) for sq in tour.squares)


def knight_adjacent(tour: Tour, board: Board) -> bool:
    squares = tour.squares
    return all(is_knight_move(a, b) for a, b in zip(squares, squares[1:]))


TOUR_CONSTRAINTS: Dict[str, Constraint] = {
    "covers board": covers_board,
    "all distinct": all_distinct,
    "within bounds": within_bounds,
    "knight adjacent": knight_adjacent,
}


def violations(tour: Tour, board: Board, constraints: Dict[str, Constraint] | None = None) -> List[str]:
    """Names of the constraints ``tour`` fails on ``board``."""
    constraints = TOUR_CONSTRAINTS if constraints is None else constraints
    return [name for name, check in constraints.items() if not check(tour, board)]


def check_tour(tour: Tour, board: Board, start: Position | None = None) -> Tour:
    """Raise TourIntegrityError unless ``tour`` is a valid tour (from ``start``, if given)."""
    failed = violations(tour, board)
    if start is not None and (not tour.squares or tour.start != start):
        failed.append(f"starts at {start}")
    if failed:
        raise TourIntegrityError(
            f"Recorded tour {tour} on a {board.width}x{board.height} board "
            f"fails: {', '.join(failed)}"
        )
    return tour

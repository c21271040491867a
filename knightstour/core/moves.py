"""Knight move generation."""

from __future__ import annotations

from typing import List, Tuple

from .model import Board, Position

# Enumeration order fixes the order in which sibling branches are explored,
# and so the order tours come out of the search.
KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-2, -1),
    (-1, -2),
    (-2, 1),
    (1, -2),
    (2, -1),
    (-1, 2),
    (2, 1),
    (1, 2),
)


def neighbors(pos: Position, board: Board) -> List[Position]:
    """Squares a knight on ``pos`` can jump to without leaving the board."""
    moves = []
    for dx, dy in KNIGHT_OFFSETS:
        nx, ny = pos.x + dx, pos.y + dy
        if board.in_bounds(nx, ny):
            moves.append(Position(nx, ny))
    return moves


def is_knight_move(a: Position, b: Position) -> bool:
    dx, dy = abs(a.x - b.x), abs(a.y - b.y)
    return (dx == 1 and dy == 2) or (dx == 2 and dy == 1)

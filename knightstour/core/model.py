from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

from .errors import ConfigurationError, OutOfBoundsError, ParseError

COLUMNS = string.ascii_lowercase

SquareLike = Union[str, Sequence[int]]


@dataclass(frozen=True)
class Board:
    """Rectangular board geometry."""
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"Board {name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigurationError(
                    f"Board {name} must be greater than 0, got {value}"
                )

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def position(self, x: int, y: int) -> Position:
        """Return the square at ``(x, y)``, raising if it is off the board."""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Square ({x},{y}) is outside a {self.width}x{self.height} board"
            )
        return Position(x, y)

    def squares(self) -> Iterator[Position]:
        """Every square, column by column (a1, a2, ..., b1, b2, ...)."""
        for x in range(self.width):
            for y in range(self.height):
                yield Position(x, y)


@dataclass(frozen=True)
class Position:
    """A board coordinate; ``x`` is the column and ``y`` the row, both 0-based."""
    x: int
    y: int

    @property
    def label(self) -> str:
        """Algebraic label, e.g. ``(0, 0) -> "a1"``.

        Only a bijection while the column fits one letter and the row one
        digit (width <= 26, height <= 9); larger squares still get a label
        but it will not parse back.
        """
        return f"{chr(ord('a') + self.x)}{self.y + 1}"

    @classmethod
    def from_label(cls, label: str, board: Board) -> Position:
        if not isinstance(label, str) or len(label) != 2:
            raise ParseError(f"Square label must be exactly two characters: {label!r}")
        column, row = label[0].lower(), label[1]
        if column not in COLUMNS:
            raise ParseError(f"Square label column must be a letter: {label!r}")
        if row not in string.digits or row == "0":
            raise ParseError(f"Square label row must be a digit from 1 to 9: {label!r}")
        return board.position(COLUMNS.index(column), int(row) - 1)

    @classmethod
    def parse(cls, value: SquareLike, board: Board) -> Position:
        """Build a Position from either a label or an ``(x, y)`` pair."""
        if isinstance(value, Position):
            return board.position(value.x, value.y)
        if isinstance(value, str):
            return cls.from_label(value, board)
        try:
            x, y = value
        except (TypeError, ValueError) as exc:
            raise ParseError(f"Expected a label or an (x, y) pair, got {value!r}") from exc
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
            raise ParseError(f"Square coordinates must be integers: {value!r}")
        return board.position(x, y)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Tour:
    """An immutable, completed knight's path."""
    squares: Tuple[Position, ...]

    @property
    def start(self) -> Position:
        return self.squares[0]

    def labels(self) -> list[str]:
        return [sq.label for sq in self.squares]

    def __len__(self) -> int:
        return len(self.squares)

    def __str__(self) -> str:
        return ", ".join(self.labels())

"""Exhaustive knight's tour enumeration."""

from __future__ import annotations

from .core.dispatch import count_by_start, enumerate_all, enumerate_by_start
from .core.errors import (
    ConfigurationError,
    KnightsTourError,
    OutOfBoundsError,
    ParseError,
    SearchCancelled,
    TourIntegrityError,
)
from .core.model import Board, Position, Tour
from .core.search import count_tours, iter_tours, search

__all__ = [
    "Board",
    "Position",
    "Tour",
    "search",
    "iter_tours",
    "count_tours",
    "enumerate_all",
    "enumerate_by_start",
    "count_by_start",
    "KnightsTourError",
    "ConfigurationError",
    "OutOfBoundsError",
    "ParseError",
    "TourIntegrityError",
    "SearchCancelled",
]

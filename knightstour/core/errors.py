"""Exception hierarchy."""

from __future__ import annotations


class KnightsTourError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(KnightsTourError, ValueError):
    """Invalid board dimensions or run options."""


class OutOfBoundsError(KnightsTourError, IndexError):
    """A coordinate lies outside the board."""


class ParseError(KnightsTourError, ValueError):
    """A square label could not be decoded."""


class TourIntegrityError(KnightsTourError, AssertionError):
    """A recorded tour broke a structural invariant.

    This signals a bug in the search or the move generator, never an
    ordinary "no tour from here" outcome.
    """


class SearchCancelled(KnightsTourError):
    """The search deadline passed before enumeration finished."""

"""
Summary: Exception hierarchy raised while recovering code from a reprex.
Why: Let callers tell input-resolution failures apart from usage mistakes.
"""

from __future__ import annotations


class UnreprexError(Exception):
    """Base exception for unreprex errors."""

    pass


class AmbiguousSourceError(UnreprexError):
    """Raised when no input was given and no clipboard is available."""

    pass


class InputNotFoundError(UnreprexError):
    """Raised when a path-like input does not name a readable file."""

    pass


class UnsupportedVenueError(UnreprexError, ValueError):
    """Raised when a venue string is not recognised."""

    pass


__all__ = [
    "AmbiguousSourceError",
    "InputNotFoundError",
    "UnreprexError",
    "UnsupportedVenueError",
]

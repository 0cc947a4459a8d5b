"""Exception types raised by the engine."""

from __future__ import annotations


class BeachMatchError(Exception):
    """Base class for engine errors."""


class InvalidLayoutError(BeachMatchError, ValueError):
    """A grid or layout does not have the expected shape or contents."""


class BoardGenerationError(BeachMatchError):
    """A generator ran out of attempts before producing a usable board."""

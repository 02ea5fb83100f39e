"""Deskclock feature exceptions."""
from __future__ import annotations


class DeskClockError(Exception):
    """Base exception for the deskclock feature."""


class InvalidArgument(DeskClockError, ValueError):
    """Raised when an operation receives an out-of-range argument."""


class InvalidConfiguration(DeskClockError, ValueError):
    """Raised when sleep settings would produce degenerate suggestions."""

"""Precondition checks that raise on failure."""

from collections.abc import Iterable

__all__ = ["CheckError", "check", "check_bounds"]


class CheckError(ValueError):
    """Raised when a required condition on the inputs does not hold."""


def check(condition: object, message: str) -> None:
    """Raise :class:`CheckError` with ``message`` unless ``condition`` is true."""
    if not condition:
        raise CheckError(message)


def check_bounds(values: Iterable[int], bound: int, message: str) -> None:
    """Raise :class:`CheckError` if any value is not strictly below ``bound``."""
    for value in values:
        if not value < bound:
            raise CheckError(message)
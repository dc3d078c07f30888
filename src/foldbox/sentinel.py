"""Missing-argument sentinel.

This module defines the ``MISSING`` sentinel and the `Missable` type alias.
``MISSING`` marks a parameter the caller did not pass at all, which lets
functions tell omission apart from an explicit ``None``.
"""

from dataclasses import dataclass


def _get_missing() -> "_MissingType":
    # Factory used by pickle to retrieve the one true instance.
    return MISSING


@dataclass(frozen=True)
class _MissingType:
    """Sentinel for an argument that was not supplied."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_missing, ())


# Singleton instance
MISSING = _MissingType()

type Missable[T] = T | _MissingType


def is_missing(value: object) -> bool:
    """Return True if `value` is the ``MISSING`` sentinel."""
    return isinstance(value, _MissingType)

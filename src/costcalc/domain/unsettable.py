"""Keep-or-replace handling for calculation option fields.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper used when a calculation request only overrides
some of the stored inputs.

A field of type ``Unsettable[T]`` can take two states:

* ``UNSET`` - the stored value is kept as-is.
* concrete ``T`` - the stored value is replaced (and re-validated).
"""

from dataclasses import dataclass
from typing import TypeVar


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel to mark option fields that should keep the stored value."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
type Unsettable[T] = T | _UnsetType


def resolve(value: "T | _UnsetType", current: T) -> T:
    """Return ``current`` when ``value`` is UNSET, otherwise ``value``."""
    if isinstance(value, _UnsetType):
        return current
    return value

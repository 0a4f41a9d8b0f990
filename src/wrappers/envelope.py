"""Envelope: a value that is either present or absent.

``Present`` always carries a value (``None`` included); ``Absent`` carries
nothing. Use ``is_something()``/``is_nothing()`` before ``unpack()``, or
``unpack_or()`` when a fallback is acceptable.
"""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, TypeGuard

from wrappers import _misuse
from wrappers.errors import EmptyAbsentAccessError

T = typing.TypeVar("T")
D = typing.TypeVar("D")

_ABSENT_HINT = "Check is_something() first, or use unpack_or(default)."


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Present(typing.Generic[T]):
    """An envelope holding a value."""

    value: T

    def unpack(self) -> T:
        """Return the held value."""
        return self.value

    def unpack_or(self, default: object) -> T:  # noqa: ARG002
        """Return the held value; ``default`` is ignored."""
        return self.value

    def is_something(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Absent:
    """An envelope holding nothing."""

    def unpack(self) -> typing.NoReturn:
        """Always raise: there is nothing to unpack.

        Raises:
            EmptyAbsentAccessError: Unconditionally.
        """
        raise _misuse.reported(EmptyAbsentAccessError(hint=_ABSENT_HINT), self)

    def unpack_or(self, default: D) -> D:
        """Return ``default``."""
        return default

    def is_something(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Absent()"


Envelope = Present[T] | Absent


def from_optional(value: T | None) -> Present[T] | Absent:
    """Wrap a possibly-``None`` value: ``None`` becomes ``Absent()``."""
    if value is None:
        return Absent()
    return Present(value)


def is_envelope(obj: object) -> TypeGuard[Present[Any] | Absent]:
    """Return True if ``obj`` is either ``Envelope`` variant."""
    return isinstance(obj, Present | Absent)


__all__ = ["Absent", "Envelope", "Present", "from_optional", "is_envelope"]

"""Outcome: the result of an operation that either succeeded or failed.

Both variants may carry a payload, or be built without one. The payload slot
is itself an ``Envelope``, so ``Succeeded(None)`` (a success whose value is
``None``) stays distinct from ``Succeeded()`` (a success with no value).

``unpack()`` and ``unmask()`` fail loudly when applied to the wrong variant.
Branch on ``is_success()``/``is_failure()`` first, or use ``unpack_or()``.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import enum
import logging
import typing
from typing import Any, TypeGuard

from wrappers import _misuse
from wrappers.envelope import Absent, Envelope, Present
from wrappers.errors import EmptyPayloadAccessError, WrongVariantAccessError

log = logging.getLogger(__name__)

T = typing.TypeVar("T")
E = typing.TypeVar("E")
R = typing.TypeVar("R")
D = typing.TypeVar("D")
V = typing.TypeVar("V")


class _NoValue(enum.Enum):
    TOKEN = enum.auto()


_NO_VALUE = _NoValue.TOKEN


def _slot(value: V | _NoValue) -> Envelope[V]:
    if value is _NO_VALUE:
        return Absent()
    return Present(typing.cast("V", value))


@dataclasses.dataclass(frozen=True, slots=True, init=False, repr=False)
class Succeeded(typing.Generic[T]):
    """A successful outcome, optionally carrying a value."""

    payload: Envelope[T]

    def __init__(self, value: T | _NoValue = _NO_VALUE) -> None:
        object.__setattr__(self, "payload", _slot(value))

    def unpack(self) -> T:
        """Return the success value.

        Raises:
            EmptyPayloadAccessError: The instance was built without a value.
        """
        if self.payload.is_nothing():
            raise _misuse.reported(
                EmptyPayloadAccessError(
                    variant="Succeeded",
                    operation="unpack",
                    hint="Check has_payload() first, or use unpack_or(default).",
                ),
                self,
            )
        return self.payload.unpack()

    def unpack_or(self, default: D) -> T | D:
        """Return the success value, or ``default`` when there is none."""
        return self.payload.unpack_or(default)

    def unmask(self) -> typing.NoReturn:
        """Always raise: a success has no error to unmask.

        Raises:
            WrongVariantAccessError: Unconditionally.
        """
        raise _misuse.reported(
            WrongVariantAccessError(
                variant="Succeeded",
                operation="unmask",
                hint="Check is_failure() before calling unmask().",
            ),
            self,
        )

    def has_payload(self) -> bool:
        return self.payload.is_something()

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def __repr__(self) -> str:
        if isinstance(self.payload, Present):
            return f"Succeeded({self.payload.value!r})"
        return "Succeeded()"


@dataclasses.dataclass(frozen=True, slots=True, init=False, repr=False)
class Failed(typing.Generic[E]):
    """A failed outcome, optionally carrying an error value."""

    payload: Envelope[E]

    def __init__(self, error: E | _NoValue = _NO_VALUE) -> None:
        object.__setattr__(self, "payload", _slot(error))

    def unpack(self) -> typing.NoReturn:
        """Always raise: a failure has no success value.

        Raises:
            WrongVariantAccessError: Unconditionally.
        """
        raise _misuse.reported(
            WrongVariantAccessError(
                variant="Failed",
                operation="unpack",
                hint="Check is_success() first, or use unpack_or(default).",
            ),
            self,
        )

    def unpack_or(self, default: D) -> D:
        """Return ``default``, whatever the error payload."""
        return default

    def unmask(self) -> E:
        """Return the error value.

        Raises:
            EmptyPayloadAccessError: The instance was built without a value.
        """
        if self.payload.is_nothing():
            raise _misuse.reported(
                EmptyPayloadAccessError(
                    variant="Failed",
                    operation="unmask",
                    hint="Check has_payload() before calling unmask().",
                ),
                self,
            )
        return self.payload.unpack()

    def has_payload(self) -> bool:
        return self.payload.is_something()

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def __repr__(self) -> str:
        if isinstance(self.payload, Present):
            return f"Failed({self.payload.value!r})"
        return "Failed()"


Outcome = Succeeded[T] | Failed[E]


def attempt(
    func: Callable[..., R],
    *args: Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any,
) -> Succeeded[R] | Failed[BaseException]:
    """Call ``func`` and wrap its return value or raised exception.

    Only exceptions matching ``catch`` become ``Failed``; anything else
    propagates unchanged.

    Example:
        outcome = attempt(int, "42")
        if outcome.is_success():
            print(outcome.unpack() + 1)
    """
    try:
        result = func(*args, **kwargs)
    except catch as exc:
        log.debug("attempt(%r) captured %s: %s", func, type(exc).__name__, exc)
        return Failed(exc)
    return Succeeded(result)


def is_outcome(obj: object) -> TypeGuard[Succeeded[Any] | Failed[Any]]:
    """Return True if ``obj`` is either ``Outcome`` variant."""
    return isinstance(obj, Succeeded | Failed)


__all__ = ["Failed", "Outcome", "Succeeded", "attempt", "is_outcome"]

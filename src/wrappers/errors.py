"""Exception hierarchy for wrappers.

Every error here signals caller misuse: an extraction was attempted without
first checking which variant the wrapper holds.
"""

from __future__ import annotations


class WrapperError(Exception):
    """Base exception for all wrappers errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(WrapperError):
    """Settings could not be resolved from the environment."""


class _AccessError(WrapperError):
    """Extraction attempted on an instance that cannot satisfy it."""

    def __init__(
        self,
        message: str,
        *,
        variant: str,
        operation: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.variant = variant
        self.operation = operation


class WrongVariantAccessError(_AccessError):
    """``unpack()`` on a failure, or ``unmask()`` on a success."""

    def __init__(
        self, *, variant: str, operation: str, hint: str | None = None
    ) -> None:
        super().__init__(
            f"Called `{operation}()` on an instance of `{variant}`",
            variant=variant,
            operation=operation,
            hint=hint,
        )


class EmptyPayloadAccessError(_AccessError):
    """Extraction on the right variant, but it was built without a payload."""

    def __init__(
        self, *, variant: str, operation: str, hint: str | None = None
    ) -> None:
        super().__init__(
            f"Called `{operation}()` on an instance of `{variant}` which has no value",
            variant=variant,
            operation=operation,
            hint=hint,
        )


class EmptyAbsentAccessError(_AccessError):
    """``unpack()`` on ``Absent``."""

    def __init__(
        self,
        *,
        variant: str = "Absent",
        operation: str = "unpack",
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"Called `{operation}()` on an instance of `{variant}`",
            variant=variant,
            operation=operation,
            hint=hint,
        )


__all__ = [
    "ConfigurationError",
    "EmptyAbsentAccessError",
    "EmptyPayloadAccessError",
    "WrapperError",
    "WrongVariantAccessError",
]

"""wrappers: explicit success/failure and present/absent values.

Public API:
    - Succeeded / Failed: the two variants of ``Outcome``
    - Present / Absent: the two variants of ``Envelope``
    - attempt(): run a callable, capturing exceptions as ``Failed``
    - from_optional(): turn a possibly-``None`` value into an ``Envelope``
"""

from __future__ import annotations

import logging

from wrappers.config import Settings, get_settings
from wrappers.envelope import Absent, Envelope, Present, from_optional, is_envelope
from wrappers.errors import (
    ConfigurationError,
    EmptyAbsentAccessError,
    EmptyPayloadAccessError,
    WrapperError,
    WrongVariantAccessError,
)
from wrappers.outcome import Failed, Outcome, Succeeded, attempt, is_outcome

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("wrappers")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("wrappers").addHandler(logging.NullHandler())

__all__ = [
    "Absent",
    "ConfigurationError",
    "EmptyAbsentAccessError",
    "EmptyPayloadAccessError",
    "Envelope",
    "Failed",
    "Outcome",
    "Present",
    "Settings",
    "Succeeded",
    "WrapperError",
    "WrongVariantAccessError",
    "attempt",
    "from_optional",
    "get_settings",
    "is_envelope",
    "is_outcome",
]

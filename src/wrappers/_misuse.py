"""Opt-in logging of wrapper misuse at the point it is raised."""

from __future__ import annotations

import logging
import typing

from wrappers.config import get_settings
from wrappers.errors import ConfigurationError, WrapperError

log = logging.getLogger(__name__)

ErrT = typing.TypeVar("ErrT", bound=WrapperError)


def _logging_enabled() -> bool:
    # An unreadable flag must never replace the misuse error being raised.
    try:
        return get_settings().log_misuse
    except ConfigurationError:
        return False


def reported(err: ErrT, instance: object) -> ErrT:
    """Return ``err`` unchanged, logging it first when misuse logging is on."""
    if _logging_enabled():
        log.warning("%s (instance: %r)", err, instance)
    return err

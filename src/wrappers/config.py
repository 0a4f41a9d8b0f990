"""Configuration: frozen Settings resolved from environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
import os

from dotenv import load_dotenv

from wrappers.errors import ConfigurationError

load_dotenv()

_LOG_MISUSE_ENV = "WRAPPERS_LOG_MISUSE"
_TRUE_VALUES = frozenset({"1"})
_FALSE_VALUES = frozenset({"", "0"})


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings.

    Example:
        settings = Settings(log_misuse=True)
        # or, resolved from WRAPPERS_LOG_MISUSE:
        settings = get_settings()
    """

    #: Log misuse errors at WARNING before raising them.
    log_misuse: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``WRAPPERS_*`` environment variables."""
        return cls(log_misuse=_read_flag(_LOG_MISUSE_ENV))


def _read_flag(name: str) -> bool:
    raw = os.environ.get(name, "").strip()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid value for {name}: {raw!r}",
        hint=f"Set {name}=1 to enable, or 0 / unset to disable.",
    )


@cache
def get_settings() -> Settings:
    """Return process-wide settings; call ``get_settings.cache_clear()`` to re-read."""
    return Settings.from_env()


__all__ = ["Settings", "get_settings"]

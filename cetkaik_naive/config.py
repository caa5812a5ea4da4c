"""Environment-driven configuration flags.

Flags are read at call time rather than import time so that a host (or a
test using ``monkeypatch.setenv``) can toggle them without reloading
modules.

    CETKAIK_STRICT_INVARIANTS  check board invariants after every field
                               operation (default: off)
    CETKAIK_LOG_LEVEL          default level for ``setup_logging`` (INFO)
    CETKAIK_LOG_FORMAT         default format style for ``setup_logging``
"""
from __future__ import annotations

import os

from .errors import ConfigurationError

__all__ = [
    "STRICT_INVARIANTS_ENV",
    "LOG_LEVEL_ENV",
    "LOG_FORMAT_ENV",
    "env_flag",
    "strict_invariants_enabled",
    "default_log_level",
    "default_log_format",
]

STRICT_INVARIANTS_ENV = "CETKAIK_STRICT_INVARIANTS"
LOG_LEVEL_ENV = "CETKAIK_LOG_LEVEL"
LOG_FORMAT_ENV = "CETKAIK_LOG_FORMAT"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def env_flag(name: str, default: bool = False) -> bool:
    """Parse a boolean environment flag.

    Raises ConfigurationError for values that are neither truthy nor falsy,
    so a typo such as ``CETKAIK_STRICT_INVARIANTS=ture`` does not silently
    disable the check.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"Unrecognized value for boolean flag {name}",
        context={"value": raw},
    )


def strict_invariants_enabled() -> bool:
    return env_flag(STRICT_INVARIANTS_ENV, default=False)


def default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "INFO").upper()


def default_log_format() -> str:
    return os.getenv(LOG_FORMAT_ENV, "default").lower()

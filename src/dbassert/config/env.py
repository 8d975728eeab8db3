"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Final

from .errors import ConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values


def env_flag(name: str, *, default: bool = False) -> bool:
    """Read a boolean flag; unset means ``default``."""

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().casefold()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for {name}: {value!r}")


def env_log_level(name: str) -> int | None:
    """Read a logging level name such as ``DEBUG``; unset or blank means ``None``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Invalid logging level for {name}: {value!r}")
    return level

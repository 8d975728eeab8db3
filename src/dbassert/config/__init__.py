"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, env_log_level, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .source import (
    DATABASE_URI_VAR,
    ECHO_VAR,
    LOG_LEVEL_VAR,
    SourceConfig,
    get_source_config,
)

__all__ = [
    "DATABASE_URI_VAR",
    "ECHO_VAR",
    "LOG_LEVEL_VAR",
    "ConfigurationError",
    "MissingConfigurationError",
    "SourceConfig",
    "env_flag",
    "env_log_level",
    "get_source_config",
    "require_env_vars",
]

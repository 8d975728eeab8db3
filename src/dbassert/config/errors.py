"""Errors raised while reading the source configuration."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a configuration variable holds a value that cannot be used."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required variables, such as the database URI, are absent or blank."""

"""Configuration of the database the assertions read from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from dotenv import load_dotenv

from .env import env_flag, env_log_level, require_env_vars

if TYPE_CHECKING:
    from pathlib import Path

DATABASE_URI_VAR: Final[str] = "DBASSERT_DATABASE_URI"
ECHO_VAR: Final[str] = "DBASSERT_ECHO"
LOG_LEVEL_VAR: Final[str] = "DBASSERT_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class SourceConfig:
    uri: str
    echo: bool = False
    log_level: int | None = None


def get_source_config(*, env_file: str | Path | None = None) -> SourceConfig:
    """Read the source configuration from the environment.

    Variables from ``env_file`` (or a ``.env`` found from the working directory)
    are loaded first without overriding variables that are already set.
    """

    load_dotenv(dotenv_path=env_file, override=False)
    values = require_env_vars((DATABASE_URI_VAR,))
    return SourceConfig(
        uri=values[DATABASE_URI_VAR],
        echo=env_flag(ECHO_VAR),
        log_level=env_log_level(LOG_LEVEL_VAR),
    )

"""SQLAlchemy adapter package for dbassert."""

from __future__ import annotations

from .recorder import ChangeRecorder
from .source import connect, create_source_engine, load_request, load_table

__all__ = ["ChangeRecorder", "connect", "create_source_engine", "load_request", "load_table"]

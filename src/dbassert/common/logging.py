"""Shared logging helpers for dbassert."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once.

    Parameters mirror ``logging.basicConfig``. Loading sources and computing changes
    log at DEBUG, so pass ``level=logging.DEBUG`` to trace what a test read.
    Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )

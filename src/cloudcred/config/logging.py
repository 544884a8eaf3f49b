"""Shared logging helpers for cloudcred."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for CLI use.

    A thin wrapper over ``logging.basicConfig``. The reconciler logs its per-verb
    traces at DEBUG, so pass ``level=logging.DEBUG`` to see them and ``force=True``
    to replace handlers installed earlier.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )

"""Logging setup for the ``dto-hydrator`` command."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for the CLI.

    ``main.main`` calls this with ``HydrationConfig.log_level``, which comes from
    ``DTO_HYDRATOR_LOG_LEVEL``. Applications importing the library keep their own
    logging setup; ``force=True`` replaces handlers installed earlier.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )

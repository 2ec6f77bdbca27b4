"""Standard library logging implementation of LoggingPort."""

from __future__ import annotations

import logging


class StdlibLoggingAdapter:
    """LoggingPort backed by a :mod:`logging` logger.

    Args:
        logger: Logger to write to. Defaults to this package's logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("fleetwarden")

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

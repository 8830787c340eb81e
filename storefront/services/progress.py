"""Line-oriented progress reporting for long-running seed stages."""

import logging
from typing import Protocol


class ProgressReporter(Protocol):
    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def line(self, message: str) -> None: ...


class LoggingProgress:
    """Send progress messages to a :mod:`logging` logger.

    ``info`` and ``line`` log at INFO, ``warn`` at WARNING.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("storefront.seed")

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def line(self, message: str) -> None:
        self._logger.info(message)

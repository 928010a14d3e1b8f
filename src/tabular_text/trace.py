"""Diagnostic sink used by the fail-soft parse entry point."""

import logging
from typing import Protocol


class Trace(Protocol):  # pylint: disable=too-few-public-methods
    """Anything exposing ``error(message, cause)`` can receive parse failures."""

    def error(self, message: str, cause: BaseException) -> None: ...


class LoggingTrace:  # pylint: disable=too-few-public-methods
    """Adapt a standard ``logging.Logger`` to the Trace protocol."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def error(self, message: str, cause: BaseException) -> None:
        """Log *message* at ERROR level with the cause's traceback attached."""
        self.logger.error("%s: %s", message, cause, exc_info=cause)

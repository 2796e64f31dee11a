"""
Interceptors for routing standard library logging into a chibilog Logger.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from .diagnostics import get_logger, is_internal
from .levels import Severity
from .types import LogOptions

if TYPE_CHECKING:
    from .core import Logger

_log = get_logger("interceptors")


def severity_for(levelno: int) -> Severity:
    """Map a stdlib level number onto the closest severity."""
    if levelno >= logging.CRITICAL:
        return Severity.FATAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARN
    if levelno >= logging.INFO:
        return Severity.INFO
    if levelno > 5:
        return Severity.DEBUG
    return Severity.TRACE


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging records to a chibilog Logger.

    Each record is tagged with its simplified logger name. Records coming
    from chibilog's own diagnostics are skipped to avoid loops.
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        if is_internal(record.name):
            return
        try:
            msg = self.format(record)
            tag = self._simplify_logger_name(record.name)
            self.logger.emit(severity_for(record.levelno), [msg], LogOptions(tags=[tag]))
        except Exception:
            self.handleError(record)

    @staticmethod
    def _simplify_logger_name(name: str) -> str:
        """
        Simplify a logger name for display.

        Rules:
        - "" or "root" -> "stdlib"
        - "worker.jobs" -> "worker.jobs"
        - "myapp.db.pool" -> "db.pool"
        - Longer names -> keep last 2 parts
        """
        if not name or name == "root":
            return "stdlib"

        parts = name.split(".")
        if len(parts) <= 2:
            return name

        return ".".join(parts[-2:])


def intercept_loggers(logger: Logger, names: Iterable[str] = ("",)) -> RedirectStdLibHandler:
    """Replace the handlers of the named stdlib loggers with one redirect handler.

    The empty name targets the root logger. Intercepted non-root loggers stop
    propagating so records are not delivered twice.
    """
    handler = RedirectStdLibHandler(logger)
    for name in names:
        lg = logging.getLogger(name)
        lg.handlers = [handler]
        if name:
            lg.propagate = False
        _log.debug("stdlib_logger_intercepted", name=name or "root", logger_id=logger.id)
    return handler

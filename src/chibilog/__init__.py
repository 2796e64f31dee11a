"""
Leveled logging with a decorated console and per-day log files.

Each call is appended to ``<log_dir>/log_<pid>_<DD>-<MM>-<YYYY>.log`` and,
when its severity reaches the configured minimum, printed to the console
channel matching its severity.

Usage:
    from chibilog import Logger

    logger = Logger(log_dir="./logs", minimum_level="warn")
    logger.info("saved to file only")
    logger.error("printed", "and filed", {"tags": ["AUDIT"], "sep": " | "})
"""

from .config import LoggerSettings
from .core import Logger, LoggerConfig
from .exceptions import ChibiLogError, DuplicateIdentifierError
from .formatters import DateFormat, colorize, colorize_json, render_line, strip_ansi
from .interceptors import RedirectStdLibHandler, intercept_loggers
from .io import StreamToLogger
from .levels import DefaultTag, Severity
from .registry import LoggerRegistry, generate_id, get_registry
from .sinks import ConsoleSink, FileSink
from .types import LogEvent, LogOptions

__all__ = [
    "ChibiLogError",
    "ConsoleSink",
    "DateFormat",
    "DefaultTag",
    "DuplicateIdentifierError",
    "FileSink",
    "LogEvent",
    "LogOptions",
    "Logger",
    "LoggerConfig",
    "LoggerRegistry",
    "LoggerSettings",
    "RedirectStdLibHandler",
    "Severity",
    "StreamToLogger",
    "colorize",
    "colorize_json",
    "generate_id",
    "get_registry",
    "intercept_loggers",
    "render_line",
    "strip_ansi",
]

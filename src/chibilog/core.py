"""
Logger orchestration: event construction, rendering and dispatch.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

from .arguments import join_parts, split_options
from .config import LoggerSettings
from .diagnostics import get_logger
from .formatters import (
    DateFormatter,
    FileNamer,
    LineFormatter,
    default_file_name,
    format_iso_8601,
    render_line,
    render_raw,
    strip_ansi,
)
from .levels import DEFAULT_TAGS, PRINT_TAGS, Severity
from .registry import LoggerRegistry, get_registry, normalize_id
from .sinks import BaseSink, ConsoleSink, FileSink
from .types import LogEvent, LogOptions

Clock = Callable[[], datetime]

_log = get_logger("core")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LoggerConfig:
    """Immutable per-logger configuration with resolved strategies.

    ``log_dir`` is made absolute against the working directory at
    construction time.
    """

    log_dir: Path
    minimum_level: Severity = Severity.INFO
    file_namer: FileNamer = default_file_name
    line_formatter: LineFormatter = render_line
    date_formatter: DateFormatter = format_iso_8601
    console: bool = True
    strip_ansi_in_file: bool = True
    strip_ansi_in_console: bool = False
    colorize_json: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_dir", Path(os.path.abspath(self.log_dir)))
        object.__setattr__(self, "minimum_level", Severity.parse(self.minimum_level))

    @classmethod
    def from_settings(
        cls,
        settings: LoggerSettings,
        *,
        file_namer: Optional[FileNamer] = None,
        line_formatter: Optional[LineFormatter] = None,
        date_formatter: Optional[DateFormatter] = None,
    ) -> "LoggerConfig":
        return cls(
            log_dir=settings.log_dir,
            minimum_level=settings.minimum_level,
            file_namer=file_namer or default_file_name,
            line_formatter=line_formatter or render_line,
            date_formatter=date_formatter or settings.date_format.formatter,
            console=settings.console,
            strip_ansi_in_file=settings.strip_ansi_in_file,
            strip_ansi_in_console=settings.strip_ansi_in_console,
            colorize_json=settings.colorize_json,
        )


class Logger:
    """Leveled logger writing to the console and to a per-day file.

    Every call is appended to the file. The console only receives calls at
    or above ``minimum_level`` and only when console output is enabled.

    Args:
        settings: Base settings; loaded from the environment when omitted.
        registry: Registry to join; the process default when omitted.
        file_namer: ``datetime -> file name`` override.
        line_formatter: ``(time, severity, message, tags) -> line`` override.
        date_formatter: ``datetime -> str`` override of the date preset.
        clock: Source of event timestamps.
        console_sink: Sink receiving console output.
        **overrides: Any ``LoggerSettings`` field, e.g. ``log_dir`` or
            ``minimum_level``.

    Raises:
        TypeError: an override is not a ``LoggerSettings`` field.
        DuplicateIdentifierError: ``custom_id`` is already registered.
    """

    def __init__(
        self,
        settings: Optional[LoggerSettings] = None,
        *,
        registry: Optional[LoggerRegistry] = None,
        file_namer: Optional[FileNamer] = None,
        line_formatter: Optional[LineFormatter] = None,
        date_formatter: Optional[DateFormatter] = None,
        clock: Optional[Clock] = None,
        console_sink: Optional[BaseSink] = None,
        **overrides: Any,
    ) -> None:
        unknown = sorted(set(overrides) - set(LoggerSettings.model_fields))
        if unknown:
            raise TypeError(f"Logger() got unexpected keyword argument(s): {', '.join(unknown)}")

        if settings is None:
            settings = LoggerSettings(**overrides)
        elif overrides:
            settings = LoggerSettings(**{**settings.model_dump(), **overrides})

        self.settings = settings
        self.config = LoggerConfig.from_settings(
            settings,
            file_namer=file_namer,
            line_formatter=line_formatter,
            date_formatter=date_formatter,
        )
        self._clock = clock or _utc_now
        self._console_sink = console_sink or ConsoleSink()
        self._file_sink = FileSink(self.config.log_dir, self.config.file_namer)
        self._registry = registry if registry is not None else get_registry()

        # id creation and registration must not interleave with another logger's
        with self._registry.lock:
            self.id = normalize_id(settings.custom_id) or self._registry.create_id()
            self._registry.add(self)

        _log.debug(
            "logger_created",
            id=self.id,
            log_dir=str(self.config.log_dir),
            minimum_level=self.config.minimum_level.name,
        )

    def __repr__(self) -> str:
        return f"Logger(id={self.id!r}, log_dir={str(self.config.log_dir)!r}, minimum_level={self.config.minimum_level.name})"

    @property
    def registry(self) -> LoggerRegistry:
        return self._registry

    @property
    def log_dir(self) -> Path:
        return self.config.log_dir

    @property
    def minimum_level(self) -> Severity:
        return self.config.minimum_level

    def is_enabled_for(self, severity: Union[Severity, int, str]) -> bool:
        """Whether a call at ``severity`` reaches the console."""
        return self.config.console and Severity.parse(severity) >= self.config.minimum_level

    # =========================================================================
    # Pipeline
    # =========================================================================

    def emit(
        self,
        severity: Union[Severity, int, str],
        parts: Sequence[Any],
        options: Union[LogOptions, Mapping, None] = None,
        *,
        raw: bool = False,
    ) -> LogEvent:
        """Log message parts at ``severity`` and return the event.

        Without options the severity's default tags and a single-space
        separator apply. ``raw`` sends the bare message to the console.
        """
        severity = Severity.parse(severity)
        if options is None:
            tags = PRINT_TAGS if raw else DEFAULT_TAGS[severity]
            sep = " "
        else:
            if not isinstance(options, LogOptions):
                options = LogOptions.model_validate(dict(options))
            tags, sep = tuple(options.tags), options.sep

        event = LogEvent(
            message=join_parts(parts, sep, colorize=self.config.colorize_json),
            severity=severity,
            timestamp=self._clock(),
            tags=tuple(tags),
            raw=raw,
        )
        self.dispatch(event)
        return event

    def render(self, event: LogEvent) -> str:
        """Render the decorated line for an event."""
        time = self.config.date_formatter(event.timestamp)
        return self.config.line_formatter(time, event.severity, event.message, event.tags)

    def dispatch(self, event: LogEvent) -> None:
        """Write a built event to the console (when enabled) and to the file."""
        content = self.render(event)

        console_content = render_raw(event.message) if event.raw else content
        if self.config.strip_ansi_in_console:
            console_content = strip_ansi(console_content)
        file_content = strip_ansi(content) if self.config.strip_ansi_in_file else content

        if self.is_enabled_for(event.severity):
            self._console_sink.emit(event, console_content)

        self._file_sink.emit(event, file_content)

    def _log(self, severity: Severity, args: Sequence[Any], *, raw: bool = False) -> None:
        parts, options = split_options(args)
        self.emit(severity, parts, options, raw=raw)

    # =========================================================================
    # Leveled API
    # =========================================================================

    def trace(self, *args: Any) -> None:
        self._log(Severity.TRACE, args)

    def debug(self, *args: Any) -> None:
        self._log(Severity.DEBUG, args)

    def info(self, *args: Any) -> None:
        self._log(Severity.INFO, args)

    def log(self, *args: Any) -> None:
        """Alias of ``info``."""
        self._log(Severity.INFO, args)

    def warn(self, *args: Any) -> None:
        self._log(Severity.WARN, args)

    def error(self, *args: Any) -> None:
        self._log(Severity.ERROR, args)

    def fatal(self, *args: Any) -> None:
        self._log(Severity.FATAL, args)

    def logger(self, severity: Union[Severity, int, str], *args: Any) -> None:
        """Log at an explicit severity."""
        self._log(Severity.parse(severity), args)

    def print(self, *args: Any) -> None:
        """Print the bare message to the console while filing the decorated record.

        Tagged ``PRINT`` by default and logged at info severity.
        """
        self._log(Severity.INFO, args, raw=True)

"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import sys
import threading
import weakref
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .formatters import FileNamer, default_file_name
from .levels import Severity
from .types import LogEvent


class Channel(str, Enum):
    """Console output channels."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


def channel_for(severity: Severity) -> Channel:
    """Map a severity onto its console channel."""
    if severity <= Severity.DEBUG:
        return Channel.DEBUG
    if severity == Severity.INFO:
        return Channel.INFO
    if severity == Severity.WARN:
        return Channel.WARN
    return Channel.ERROR


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    @abstractmethod
    def emit(self, event: LogEvent, content: str) -> None:
        """Write already rendered content for an event."""
        ...

    def close(self) -> None:
        """Release resources held by the sink."""


class ConsoleSink(BaseSink):
    """Console sink routing each event to a channel stream by severity.

    Args:
        channels: Optional stream per channel. Channels left out resolve to
            ``sys.stdout`` (debug, info) or ``sys.stderr`` (warn, error) at
            write time.
    """

    def __init__(self, channels: Optional[Mapping[Channel, Any]] = None):
        self._channels: Dict[Channel, Any] = dict(channels or {})

    def stream_for(self, channel: Channel) -> Any:
        stream = self._channels.get(channel)
        if stream is not None:
            return stream
        if channel in (Channel.DEBUG, Channel.INFO):
            return sys.stdout
        return sys.stderr

    def emit(self, event: LogEvent, content: str) -> None:
        stream = self.stream_for(channel_for(event.severity))
        stream.write(content + "\n")
        stream.flush()


class _PathLock:
    """Per-path lock; entries vanish once no append holds one."""

    __slots__ = ("lock", "__weakref__")

    def __init__(self) -> None:
        self.lock = threading.Lock()


class FileSink(BaseSink):
    """Append-only file sink writing one file per name computed from the event time.

    Every record is written as a newline followed by the line, so a fresh
    file starts with an empty first line.
    """

    _locks: "weakref.WeakValueDictionary[Path, _PathLock]" = weakref.WeakValueDictionary()
    _locks_guard = threading.Lock()

    def __init__(self, log_dir: str | Path, file_namer: FileNamer = default_file_name):
        self._log_dir = Path(log_dir)
        self._file_namer = file_namer

    @property
    def log_dir(self) -> Path:
        return self._log_dir

    def path_for(self, event: LogEvent) -> Path:
        return self._log_dir / self._file_namer(event.timestamp)

    def emit(self, event: LogEvent, content: str) -> None:
        self.append(self.path_for(event), content)

    @classmethod
    def _lock_for(cls, path: Path) -> _PathLock:
        with cls._locks_guard:
            lock = cls._locks.get(path)
            if lock is None:
                lock = cls._locks[path] = _PathLock()
            return lock

    @classmethod
    def append(cls, path: str | Path, content: str) -> None:
        """Append a record, creating parent directories and the file when missing.

        OSError from the filesystem propagates to the caller.
        """
        path = Path(path)
        path_lock = cls._lock_for(path)
        with path_lock.lock:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
            with open(path, "a", encoding="utf-8", errors="backslashreplace") as f:
                f.write("\n" + content)

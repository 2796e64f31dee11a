"""
I/O redirection utilities.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .core import Logger


class StreamToLogger:
    """Redirects complete lines written to a text stream into ``logger.print``.

    The console receives the bare line and the file a decorated record.
    When the logger's console output lands back on this stream (e.g. it
    replaced ``sys.stdout``), that output goes straight to the original stream.
    Attributes not defined here are proxied to the original stream.
    """

    def __init__(self, logger: Logger, original_stream: Optional[Any] = None):
        self.logger = logger
        self.original_stream = original_stream
        self.linebuf = ""
        self._local = threading.local()

    @property
    def _forwarding(self) -> bool:
        return getattr(self._local, "active", False)

    def _forward(self, line: str) -> None:
        self._local.active = True
        try:
            self.logger.print(line)
        finally:
            self._local.active = False

    def write(self, buf: str | bytes) -> int:
        if isinstance(buf, bytes):
            buf = buf.decode(self.encoding, errors="replace")

        if self._forwarding:
            if self.original_stream is not None:
                self.original_stream.write(buf)
            return len(buf)

        for line in buf.splitlines(True):
            if line.endswith(("\n", "\r")):
                line, self.linebuf = self.linebuf + line.rstrip("\r\n"), ""
                self._forward(line)
            else:
                self.linebuf += line
        return len(buf)

    def flush(self) -> None:
        if self._forwarding:
            if self.original_stream is not None:
                self.original_stream.flush()
            return
        if self.linebuf:
            line, self.linebuf = self.linebuf, ""
            self._forward(line)

    def isatty(self) -> bool:
        return False

    # Proxy all other methods to original stream
    def __getattr__(self, name: str) -> Any:
        original = self.__dict__.get("original_stream")
        if original is None:
            raise AttributeError(name)
        return getattr(original, name)

    @property
    def encoding(self) -> str:
        return getattr(self.original_stream, "encoding", None) or "utf-8"

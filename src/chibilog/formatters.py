"""
Log line formatters, date presets and color utilities.
"""

from __future__ import annotations

import os
import re
from datetime import datetime, timezone
from email.utils import format_datetime
from enum import Enum
from typing import Callable, Sequence

from .levels import SEVERITY_STYLES, TAG_STYLES, Severity

# =============================================================================
# Strategy Signatures
# =============================================================================

LineFormatter = Callable[[str, Severity, str, Sequence[str]], str]
DateFormatter = Callable[[datetime], str]
FileNamer = Callable[[datetime], str]

# =============================================================================
# ANSI Color Codes
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "time": "\033[90m",  # Gray
    # Severities
    "trace": "\033[36m",  # Cyan
    "debug": "\033[34m",  # Blue
    "info": "\033[92m",  # Bright Green
    "warn": "\033[33m",  # Yellow
    "error": "\033[31m",  # Red
    "fatal": "\033[41;37m",  # White on Red
    # Catalog tags
    "success": "\033[92m",
    "notice": "\033[94m",
    "verbose": "\033[90m",
    "audit": "\033[95m",
    "tag_debug": "\033[96m",
    "print": "\033[37m",
    "tag_warn": "\033[33m",
    "tag_error": "\033[91m",
    # JSON tokens
    "json_key": "\033[33m",
    "json_string": "\033[32m",
    "json_number": "\033[36m",
    "json_boolean": "\033[35m",
    "json_null": "\033[31m",
}

ANSI_PATTERN = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

JSON_TOKEN_PATTERN = re.compile(
    r'("(?:\\\\|\\"|[^"])*"(?=\s*:))'
    r'|("(?:\\\\|\\"|[^"])*")'
    r"|(\b\d+\.?\d*\b)"
    r"|\b(true|false)\b"
    r"|\b(null)\b"
)


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text. Unknown tokens leave the text unstyled."""
    code = COLORS.get(color)
    if code is None:
        return text
    return f"{code}{text}{COLORS['reset']}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences, leaving only the plain text.

    This is not a terminal reset: the result is suitable for files and for
    comparing strings that may carry color codes.
    """
    return ANSI_PATTERN.sub("", text)


def colorize_tag(tag: str) -> str:
    """Color a tag when it belongs to the catalog; other tags stay plain."""
    style = TAG_STYLES.get(tag)
    if style is None:
        return tag
    return colorize(colorize(tag, style), "bold")


def colorize_json(text: str) -> str:
    """Highlight keys, strings, numbers, booleans and null in a JSON string."""

    def _replace(match: re.Match[str]) -> str:
        key, string, number, boolean, null = match.groups()
        if key:
            return colorize(key, "json_key")
        if string:
            return colorize(string, "json_string")
        if number:
            return colorize(number, "json_number")
        if boolean:
            return colorize(boolean, "json_boolean")
        if null:
            return colorize(null, "json_null")
        return match.group(0)

    return JSON_TOKEN_PATTERN.sub(_replace, text)


# =============================================================================
# Line Formatter
# =============================================================================


def render_line(time: str, severity: Severity, message: str, tags: Sequence[str]) -> str:
    """Render the default decorated line.

    Format: [time] [LEVEL] (TAG1, TAG2) message
    """
    time_text = colorize(time, "time")
    level_text = colorize(severity.name, SEVERITY_STYLES[severity])
    tag_text = ", ".join(colorize_tag(tag.upper()) for tag in tags)
    if tag_text:
        tag_text = f" ({tag_text})"

    return f"[{time_text}] [{level_text}]{tag_text} {message}"


def render_raw(message: str) -> str:
    return message


# =============================================================================
# Date Presets
# =============================================================================


def _as_aware(date: datetime) -> datetime:
    # naive datetimes are taken as local time
    return date if date.tzinfo is not None else date.astimezone()


def format_iso_8601(date: datetime) -> str:
    """Format as a UTC ISO 8601 string with millisecond precision, e.g. 2023-03-15T12:34:56.789Z."""
    utc = _as_aware(date).astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def format_local(date: datetime) -> str:
    """Format in the local timezone using the locale's date and time representation."""
    return _as_aware(date).astimezone().strftime("%x, %X")


def format_utc(date: datetime) -> str:
    """Format as an RFC 7231 UTC string, e.g. Wed, 15 Mar 2023 12:34:56 GMT."""
    return format_datetime(_as_aware(date).astimezone(timezone.utc), usegmt=True)


class DateFormat(str, Enum):
    """Preset timestamp renderings selectable from configuration."""

    ISO_8601 = "iso_8601"
    LOCAL = "local"
    UTC = "utc"

    @property
    def formatter(self) -> DateFormatter:
        return _DATE_FORMATTERS[self]


_DATE_FORMATTERS = {
    DateFormat.ISO_8601: format_iso_8601,
    DateFormat.LOCAL: format_local,
    DateFormat.UTC: format_utc,
}


# =============================================================================
# File Naming
# =============================================================================


def default_file_name(date: datetime) -> str:
    """One file per process and local calendar day: log_<pid>_<DD>-<MM>-<YYYY>.log."""
    local = _as_aware(date).astimezone()
    return f"log_{os.getpid()}_{local:%d}-{local:%m}-{local:%Y}.log"

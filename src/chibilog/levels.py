"""
Severity levels and the semantic tag catalog.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Tuple


class Severity(IntEnum):
    """Ordered log severities.

    Filtering and console channel selection compare ordinals, so the
    integer values are part of the contract.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Resolve a severity from a member, an ordinal, or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls(int(name))
            if name == "WARNING":
                return cls.WARN
            if name == "CRITICAL":
                return cls.FATAL
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown severity: {value!r}") from None
        return cls(int(value))


class DefaultTag(str, Enum):
    """Catalog tags carrying a rendering hint."""

    SUCCESS = "SUCCESS"  # successful operation
    NOTICE = "NOTICE"  # important information
    VERBOSE = "VERBOSE"
    PRINT = "PRINT"
    AUDIT = "AUDIT"  # user action
    DEBUG = "DEBUG"
    WARN = "WARN"
    ERROR = "ERROR"


# Style token per severity, resolved by formatters.colorize
SEVERITY_STYLES: Dict[Severity, str] = {
    Severity.TRACE: "trace",
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARN: "warn",
    Severity.ERROR: "error",
    Severity.FATAL: "fatal",
}

# Style token per catalog tag
TAG_STYLES: Dict[str, str] = {
    DefaultTag.SUCCESS.value: "success",
    DefaultTag.NOTICE.value: "notice",
    DefaultTag.VERBOSE.value: "verbose",
    DefaultTag.AUDIT.value: "audit",
    DefaultTag.DEBUG.value: "tag_debug",
    DefaultTag.PRINT.value: "print",
    DefaultTag.WARN.value: "tag_warn",
    DefaultTag.ERROR.value: "tag_error",
}

# Tags applied when a call does not pass its own. info and fatal stay plain.
DEFAULT_TAGS: Dict[Severity, Tuple[str, ...]] = {
    Severity.TRACE: (DefaultTag.VERBOSE.value,),
    Severity.DEBUG: (DefaultTag.DEBUG.value,),
    Severity.INFO: (),
    Severity.WARN: (DefaultTag.WARN.value,),
    Severity.ERROR: (DefaultTag.ERROR.value,),
    Severity.FATAL: (),
}

PRINT_TAGS: Tuple[str, ...] = (DefaultTag.PRINT.value,)

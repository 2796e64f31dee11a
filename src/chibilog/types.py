from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from .levels import Severity


@dataclass(frozen=True)
class LogEvent:
    """A single log call.

    The timestamp is captured once and drives both the rendered time and the
    target file name. ``raw`` asks the console for the bare message.
    """

    message: str
    severity: Severity
    timestamp: datetime
    tags: Tuple[str, ...] = ()
    raw: bool = False


class LogOptions(BaseModel):
    """Inline options passed as the trailing argument of a log call.

    Missing ``tags`` means no tags at all, not the call's default tags.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    tags: List[str] = []
    sep: str = " "

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, (str, Mapping)) or not isinstance(value, Iterable):
            return [str(value)]
        return [str(tag) for tag in value]

    @field_validator("sep", mode="before")
    @classmethod
    def _coerce_sep(cls, value):
        # None reads as an absent separator
        if value is None:
            return " "
        return str(value)

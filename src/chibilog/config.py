"""
Logger Configuration.

Values load from ``CHIBILOG_*`` environment variables and ``.env``; keyword
arguments given to ``Logger`` take precedence.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .formatters import DateFormat
from .levels import Severity


class LoggerSettings(BaseSettings):
    """Construction-time options for a Logger."""

    model_config = SettingsConfigDict(
        env_prefix="CHIBILOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_dir: Path = Field(default=Path("./logs"), description="Directory receiving log files")
    minimum_level: Severity = Field(default=Severity.INFO, description="Lowest severity printed to the console")
    custom_id: Optional[str] = Field(default=None, description="Registry id; generated when blank")
    console: bool = Field(default=True, description="Print to the console")
    strip_ansi_in_file: bool = Field(default=True, description="Remove color codes from file records")
    strip_ansi_in_console: bool = Field(default=False, description="Remove color codes from console output")
    date_format: DateFormat = Field(default=DateFormat.ISO_8601, description="Timestamp preset")
    colorize_json: bool = Field(default=False, description="Highlight structured message parts")

    @field_validator("minimum_level", mode="before")
    @classmethod
    def _parse_level(cls, value):
        return Severity.parse(value)

    @field_validator("date_format", mode="before")
    @classmethod
    def _parse_date_format(cls, value):
        if isinstance(value, str):
            return value.strip().lower().replace("-", "_")
        return value

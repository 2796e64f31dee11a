from __future__ import annotations

import os
import typing as t
from datetime import datetime, timezone

import pytest

from chibilog import LogEvent, Logger, LoggerRegistry
from chibilog.sinks import BaseSink

FIXED_TIME = datetime(2024, 3, 15, 12, 34, 56, 789000, tzinfo=timezone.utc)


class RecordingSink(BaseSink):
    """Console sink double keeping every (event, content) pair."""

    def __init__(self) -> None:
        self.records: list[tuple[LogEvent, str]] = []

    def emit(self, event: LogEvent, content: str) -> None:
        self.records.append((event, content))

    @property
    def contents(self) -> list[str]:
        return [content for _, content in self.records]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CHIBILOG_* variables from the host environment out of tests."""
    for key in list(os.environ):
        if key.startswith("CHIBILOG_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def registry() -> LoggerRegistry:
    return LoggerRegistry()


@pytest.fixture
def console() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_logger(tmp_path, registry, console) -> t.Callable[..., Logger]:
    """Factory for loggers writing under tmp_path with a fixed clock."""

    def _make(**kwargs: t.Any) -> Logger:
        kwargs.setdefault("log_dir", tmp_path / "logs")
        kwargs.setdefault("registry", registry)
        kwargs.setdefault("clock", lambda: FIXED_TIME)
        kwargs.setdefault("console_sink", console)
        return Logger(**kwargs)

    return _make


def read_log(logger: Logger) -> str:
    files = list(logger.log_dir.iterdir())
    assert len(files) == 1
    return files[0].read_text(encoding="utf-8")


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture(name="read_log")
def read_log_fixture() -> t.Callable[[Logger], str]:
    return read_log

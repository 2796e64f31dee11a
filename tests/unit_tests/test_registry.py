"""
Logger registry tests.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest

from chibilog import registry as registry_module
from chibilog.exceptions import DuplicateIdentifierError
from chibilog.registry import ID_ALPHABET, LoggerRegistry, generate_id, get_registry, normalize_id


def _entry(id: str) -> SimpleNamespace:
    return SimpleNamespace(id=id)


class TestRegistryOperations:
    def test_add_get_and_order(self, registry) -> None:
        first, second = _entry("aaaaa"), _entry("bbbbb")
        registry.add(first)
        registry.add(second)

        assert registry.get("bbbbb") is second
        assert registry.get("zzzzz") is None
        assert registry.get_all() == [first, second]
        assert len(registry) == 2
        assert "aaaaa" in registry

    def test_duplicate_id_raises(self, registry) -> None:
        registry.add(_entry("dup"))

        with pytest.raises(DuplicateIdentifierError) as exc_info:
            registry.add(_entry("dup"))

        assert exc_info.value.code == "DUPLICATE_IDENTIFIER"
        assert exc_info.value.identifier == "dup"
        assert len(registry) == 1

    def test_remove_unknown_returns_false_and_keeps_contents(self, registry) -> None:
        kept = _entry("keep1")
        registry.add(kept)

        assert registry.remove("ghost") is False
        assert registry.get_all() == [kept]

    def test_remove_existing(self, registry) -> None:
        registry.add(_entry("gone1"))
        assert registry.remove("gone1") is True
        assert registry.get("gone1") is None

    def test_get_all_is_a_snapshot(self, registry) -> None:
        registry.add(_entry("snap1"))
        snapshot = registry.get_all()
        snapshot.clear()
        assert len(registry) == 1

    def test_redefine_replaces_contents(self, registry) -> None:
        for id in ("one11", "two22", "three"):
            registry.add(_entry(id))

        registry.redefine(lambda items: [i for i in items if i.id != "two22"])

        assert [i.id for i in registry.get_all()] == ["one11", "three"]


class TestIdentifiers:
    def test_generate_id_shape(self) -> None:
        value = generate_id()
        assert len(value) == 5
        assert set(value) <= set(ID_ALPHABET)
        assert len(generate_id(8)) == 8

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("  MyID ", "myid"), ("abc", "abc"), ("   ", None), ("", None), (None, None)],
    )
    def test_normalize_id(self, raw, expected) -> None:
        assert normalize_id(raw) == expected

    def test_create_id_regenerates_on_collision(self, registry, monkeypatch) -> None:
        registry.add(_entry("aaaaa"))
        candidates = iter(["aaaaa", "aaaaa", "bbbbb"])
        monkeypatch.setattr(registry_module, "generate_id", lambda length=5: next(candidates))

        assert registry.create_id() == "bbbbb"

    def test_removed_ids_may_be_reused(self, registry, monkeypatch) -> None:
        registry.add(_entry("aaaaa"))
        registry.remove("aaaaa")
        monkeypatch.setattr(registry_module, "generate_id", lambda length=5: "aaaaa")

        assert registry.create_id() == "aaaaa"

    def test_concurrent_loggers_get_unique_ids(self, make_logger, registry) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            loggers = list(pool.map(lambda _: make_logger(), range(64)))

        ids = [logger.id for logger in loggers]
        assert len(set(ids)) == 64
        assert len(registry) == 64

    def test_concurrent_ids_unique_with_small_space(self, make_logger) -> None:
        narrow = LoggerRegistry(id_length=1)
        with ThreadPoolExecutor(max_workers=8) as pool:
            loggers = list(pool.map(lambda _: make_logger(registry=narrow), range(30)))

        assert len({logger.id for logger in loggers}) == 30


class TestDefaultRegistry:
    def test_process_default_is_shared(self) -> None:
        assert get_registry() is get_registry()
        assert isinstance(get_registry(), LoggerRegistry)

"""
Process-wide registry of active loggers.

The registry is an ordinary object guarded by a re-entrant lock. Loggers
receive one by injection; ``get_registry()`` returns the lazily created
process default for callers that do not pass their own.
"""

from __future__ import annotations

import secrets
import threading
from typing import TYPE_CHECKING, Callable, List, Optional

from .diagnostics import get_logger
from .exceptions import DuplicateIdentifierError

if TYPE_CHECKING:
    from .core import Logger

ID_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
ID_LENGTH = 5

_log = get_logger("registry")


def generate_id(length: int = ID_LENGTH) -> str:
    """Generate a random lowercase alphanumeric identifier."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def normalize_id(value: Optional[str]) -> Optional[str]:
    """Lower-case and trim a user-supplied id. Blank input yields None."""
    if value is None:
        return None
    value = value.strip().lower()
    return value or None


class LoggerRegistry:
    """Ordered collection of loggers keyed by their unique id."""

    def __init__(self, id_length: int = ID_LENGTH) -> None:
        self._instances: List[Logger] = []
        self._lock = threading.RLock()
        self._id_length = id_length

    @property
    def lock(self) -> threading.RLock:
        """Lock to hold when an id must be created and claimed atomically."""
        return self._lock

    def add(self, instance: Logger) -> None:
        """Register a logger.

        Raises:
            DuplicateIdentifierError: a logger with the same id is registered.
        """
        with self._lock:
            if any(i.id == instance.id for i in self._instances):
                raise DuplicateIdentifierError(instance.id)
            self._instances.append(instance)
        _log.debug("logger_registered", id=instance.id)

    def get(self, id: str) -> Optional[Logger]:
        with self._lock:
            return next((i for i in self._instances if i.id == id), None)

    def get_all(self) -> List[Logger]:
        """Snapshot of the registered loggers in insertion order."""
        with self._lock:
            return list(self._instances)

    def remove(self, id: str) -> bool:
        """Deregister a logger by id. Returns whether anything was removed."""
        with self._lock:
            before = len(self._instances)
            self._instances = [i for i in self._instances if i.id != id]
            removed = before != len(self._instances)
        if removed:
            _log.debug("logger_removed", id=id)
        return removed

    def redefine(self, handler: Callable[[List[Logger]], List[Logger]]) -> None:
        """Replace the registry contents with ``handler(current_contents)``.

        The handler receives a copy; its result becomes the new contents.
        """
        with self._lock:
            self._instances = list(handler(list(self._instances)))
            count = len(self._instances)
        _log.debug("registry_redefined", count=count)

    def create_id(self) -> str:
        """Generate an id that no currently registered logger uses."""
        with self._lock:
            id = generate_id(self._id_length)
            while self.get(id) is not None:
                id = generate_id(self._id_length)
            return id

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and self.get(id) is not None


_default_registry: Optional[LoggerRegistry] = None
_default_guard = threading.Lock()


def get_registry() -> LoggerRegistry:
    """Return the process default registry, creating it on first use."""
    global _default_registry
    with _default_guard:
        if _default_registry is None:
            _default_registry = LoggerRegistry()
        return _default_registry

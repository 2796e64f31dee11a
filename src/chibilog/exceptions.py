"""
Exception hierarchy for chibilog.

Filesystem errors and exceptions raised by caller-supplied formatters are
not wrapped: they reach the caller of the log method unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ChibiLogError(Exception):
    """Base class for errors raised by chibilog itself."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class DuplicateIdentifierError(ChibiLogError):
    """A logger with the same identifier is already registered."""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"A logger with id '{identifier}' is already registered",
            code="DUPLICATE_IDENTIFIER",
            details={"identifier": identifier},
        )
        self.identifier = identifier

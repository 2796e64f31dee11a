"""
Internal diagnostics for the chibilog package itself.

Events go through structlog into the stdlib ``chibilog`` logger, so they stay
silent until the host application enables that logger.
"""

from __future__ import annotations

import logging

import structlog

ROOT_NAME = "chibilog"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to ``chibilog.<name>``."""
    qualified = f"{ROOT_NAME}.{name}" if name else ROOT_NAME
    return structlog.wrap_logger(
        logging.getLogger(qualified),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def is_internal(logger_name: str) -> bool:
    return logger_name == ROOT_NAME or logger_name.startswith(ROOT_NAME + ".")

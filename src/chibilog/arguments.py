"""
Normalization of variadic log call arguments.

A log call takes any number of message parts. When the last argument is a
mapping with a ``tags`` and/or ``sep`` key (or a ``LogOptions`` instance), it
is read as inline options instead of being logged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence, Tuple

import orjson

from .formatters import colorize_json
from .types import LogOptions

_OPTION_KEYS = ("tags", "sep")


def _json_dumps(value: Any) -> str:
    return orjson.dumps(value, default=str, option=orjson.OPT_NON_STR_KEYS).decode()


def to_display(value: Any, *, colorize: bool = False) -> str:
    """Convert one message part to its display string.

    Mappings and sequences render as compact JSON; booleans and None use
    JSON literals.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, bool):
        return _json_dumps(value)
    if isinstance(value, (Mapping, list, tuple)):
        text = _json_dumps(value)
        return colorize_json(text) if colorize else text
    return str(value)


def split_options(args: Sequence[Any]) -> Tuple[Sequence[Any], Optional[LogOptions]]:
    """Separate trailing inline options from the message parts."""
    if not args:
        return args, None
    last = args[-1]
    if isinstance(last, LogOptions):
        return args[:-1], last
    if isinstance(last, Mapping) and any(key in last for key in _OPTION_KEYS):
        return args[:-1], LogOptions.model_validate(dict(last))
    return args, None


def join_parts(parts: Iterable[Any], sep: str = " ", *, colorize: bool = False) -> str:
    return sep.join(to_display(part, colorize=colorize) for part in parts)


def normalize(
    args: Sequence[Any],
    default_tags: Sequence[str] = (),
    *,
    colorize: bool = False,
) -> Tuple[str, Tuple[str, ...], str]:
    """Return ``(message, tags, separator)`` for a variadic call.

    >>> normalize(("a", "b", {"tags": ["X"], "sep": "-"}))
    ('a-b', ('X',), '-')
    >>> normalize(("a", "b"), ("WARN",))
    ('a b', ('WARN',), ' ')
    """
    parts, options = split_options(args)
    if options is None:
        tags, sep = tuple(default_tags), " "
    else:
        tags, sep = tuple(options.tags), options.sep
    return join_parts(parts, sep, colorize=colorize), tags, sep

"""Field access helpers for loosely typed JSON records.

Required fields go through ``require_*`` and raise ``SchemaError`` or
``EncodingError``. Optional per-element decoding goes through ``keep_decoded``,
which keeps successes and drops failures.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from loadbench.exceptions import DecodeError, EncodingError, SchemaError

logger = logging.getLogger(__name__)

T = TypeVar("T")

U8_MAX = 255

_MISSING = object()


def require_field(record: dict, key: str, where: str) -> Any:
    """Return ``record[key]``; a missing key or JSON null is a SchemaError."""
    value = record.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise SchemaError(f"{where}: missing field {key!r}")
    return value


def require_object(record: dict, key: str, where: str) -> dict:
    value = require_field(record, key, where)
    if not isinstance(value, dict):
        raise SchemaError(f"{where}: field {key!r} must be an object, got {type(value).__name__}")
    return value


def require_array(record: dict, key: str, where: str) -> list:
    value = require_field(record, key, where)
    if not isinstance(value, list):
        raise SchemaError(f"{where}: field {key!r} must be an array, got {type(value).__name__}")
    return value


def require_str(record: dict, key: str, where: str) -> str:
    value = require_field(record, key, where)
    if not isinstance(value, str):
        raise SchemaError(f"{where}: field {key!r} must be a string, got {type(value).__name__}")
    return value


def ensure_object(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise SchemaError(f"{where} must be an object, got {type(value).__name__}")
    return value


def try_u8(value: Any) -> int | None:
    """Narrow a JSON value to an unsigned 8-bit int, or None if it does not fit.

    Only true integers qualify: bools, floats and numeric strings are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if 0 <= value <= U8_MAX:
        return value
    return None


def to_u8(value: Any, where: str) -> int:
    narrowed = try_u8(value)
    if narrowed is None:
        raise EncodingError(f"{where}: {value!r} is not an unsigned 8-bit integer")
    return narrowed


def require_u8(record: dict, key: str, where: str) -> int:
    return to_u8(require_field(record, key, where), f"{where}.{key}")


def keep_decoded(items: Iterable[Any], decode: Callable[[Any], T], where: str) -> list[T]:
    """Decode each item, keep successes in order, drop items that raise DecodeError."""
    kept: list[T] = []
    for position, item in enumerate(items):
        try:
            kept.append(decode(item))
        except DecodeError as exc:
            logger.debug("Dropped %s[%d]: %s", where, position, exc)
    return kept

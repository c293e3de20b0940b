# topmark:header:start
#
#   project      : APIResult
#   file         : schemas.py
#   file_relpath : src/apiresult/core/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical schema primitives for the APIResult JSON document.

This module centralizes:
- the wire keys of the result root (`ApiKey`),
- the wire keys of the item-list data section (`DataKey`),
- the wire keys of a diagnostic message (`MessageKey`),
- payload normalization (`normalize_payload`).

Normalization rules:
- `Path` -> `str`
- `Enum` -> `Enum.name`
- objects with `.to_dict()` -> normalize of that mapping
- mappings -> dict with stringified keys and normalized values
- sequences/sets -> lists of normalized values
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Final, cast


class ApiKey:
    """Keys of the result root object."""

    API_VERSION: Final[str] = "apiVersion"
    CONTEXT: Final[str] = "context"
    ID: Final[str] = "id"
    NOTE: Final[str] = "note"
    WARNING: Final[str] = "warning"
    ERROR: Final[str] = "error"
    DATA: Final[str] = "data"


class DataKey:
    """Keys of the item-list `data` section."""

    KIND: Final[str] = "kind"
    VERBOSITY: Final[str] = "verbosity"
    FIELDS: Final[str] = "fields"
    TOTAL_ITEMS: Final[str] = "totalItems"
    START_INDEX: Final[str] = "startIndex"
    CURRENT_ITEM_COUNT: Final[str] = "currentItemCount"
    ITEMS: Final[str] = "items"


class MessageKey:
    """Keys of a note/warning/error message object."""

    MESSAGE: Final[str] = "message"
    CODE: Final[str] = "code"
    LEVEL: Final[str] = "level"


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Conversions:
      - `Path` -> `str`
      - `Enum` -> `Enum.name`
      - object with callable `.to_dict()` -> normalize(`.to_dict()`)
      - `Mapping` -> `dict[str, normalized value]`
      - `list/tuple/set/frozenset` -> `list[normalized item]`

    Anything else is returned unchanged; the encoder decides whether it is
    serializable.

    Args:
        obj: The payload object to normalize.

    Returns:
        A JSON-serializable representation of `obj` (as far as it can tell).
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return obj.name

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj

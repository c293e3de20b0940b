# topmark:header:start
#
#   project      : APIResult
#   file         : serializers.py
#   file_relpath : src/apiresult/core/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured JSON encoding of result documents.

This module turns an already-shaped object (anything exposing `to_dict()`, or
plain mappings/sequences) into compact UTF-8 JSON bytes. Pretty-printing is a
separate step (see [`apiresult.core.machine.formatter`][apiresult.core.machine.formatter]).

The encoder is strict: `NaN`/`Infinity`, circular references and values JSON
cannot represent raise [`EncodeError`][apiresult.core.errors.EncodeError].
"""

from __future__ import annotations

import json

from apiresult.core.errors import EncodeError
from apiresult.core.machine.schemas import normalize_payload


def encode_json(obj: object) -> bytes:
    """Encode `obj` as compact JSON bytes (no whitespace, no trailing newline).

    Args:
        obj: The object to encode. Objects exposing `to_dict()` are normalized first.

    Returns:
        UTF-8 encoded JSON.

    Raises:
        EncodeError: If `obj` cannot be represented as strict JSON.
    """
    try:
        normalized: object = normalize_payload(obj)
        text: str = json.dumps(
            normalized,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        return text.encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodeError(str(exc)) from exc

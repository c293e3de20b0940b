# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/core/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Core JSON machinery.

Separation of concerns:

1) Schema primitives (wire keys + normalization)
   - [`apiresult.core.machine.schemas`][apiresult.core.machine.schemas]

2) Structured encoding (shape -> compact bytes)
   - [`apiresult.core.machine.serializers`][apiresult.core.machine.serializers]

3) Pretty-printing (bytes -> indented text)
   - [`apiresult.core.machine.formatter`][apiresult.core.machine.formatter]

4) Escaping for hand-built fragments (no encoder involved)
   - [`apiresult.core.machine.escape`][apiresult.core.machine.escape]

Rule of thumb:
- If it imports `click`, it does not belong here.
"""

from __future__ import annotations

from apiresult.core.machine.escape import escape, escape_text
from apiresult.core.machine.formatter import pretty_json
from apiresult.core.machine.schemas import ApiKey, DataKey, MessageKey, normalize_payload
from apiresult.core.machine.serializers import encode_json

__all__ = [
    "ApiKey",
    "DataKey",
    "MessageKey",
    "encode_json",
    "escape",
    "escape_text",
    "normalize_payload",
    "pretty_json",
]

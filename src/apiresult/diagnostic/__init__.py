# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic messages and their per-operation latches.

Design:
    - A diagnostic is an immutable `Message` (text, code, level).
    - Producers latch messages on an `OperationContext`; the output builder
      reads the latches once when assembling the result document.
"""

from __future__ import annotations

from apiresult.diagnostic.accumulators import (
    OperationContext,
    default_operation,
    set_fatal_error,
    set_note,
    set_warning,
)
from apiresult.diagnostic.model import Message, MessageLevel

__all__ = [
    "Message",
    "MessageLevel",
    "OperationContext",
    "default_operation",
    "set_fatal_error",
    "set_note",
    "set_warning",
]

# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""APIResult package.

APIResult builds the versioned JSON "result" document returned by command-line
tools (API version, context, status id, optional note/warning/error and an
item-list data section) and guarantees that *some* well-formed JSON is produced
even when the regular encoder fails.

Typical use:

```python
from apiresult import Message, build_output, set_warning

set_warning(Message("cache is stale", code=12, level="ISSUE"))
text, ok = build_output("1.0", "globs", "env", "", ["name", "value"], items)
```
"""

from __future__ import annotations

from apiresult.config.settings import (
    FormatOptions,
    json_indent_level,
    json_prefix,
    json_raw,
    set_json_indent_level,
    set_json_prefix,
    set_json_raw,
)
from apiresult.core.errors import (
    ApiResultError,
    ConfigError,
    EncodeError,
    FormatError,
)
from apiresult.core.machine.escape import escape, escape_text
from apiresult.core.machine.formatter import pretty_json
from apiresult.diagnostic.accumulators import (
    OperationContext,
    default_operation,
    set_fatal_error,
    set_note,
    set_warning,
)
from apiresult.diagnostic.model import Message, MessageLevel
from apiresult.result.builder import build_output, render_output
from apiresult.result.fallback import build_fallback
from apiresult.result.model import ItemList, ResultRoot, new_root
from apiresult.result.outcomes import Encoded, Fallback, OutputResult

__all__ = [
    "ApiResultError",
    "ConfigError",
    "Encoded",
    "EncodeError",
    "Fallback",
    "FormatError",
    "FormatOptions",
    "ItemList",
    "Message",
    "MessageLevel",
    "OperationContext",
    "OutputResult",
    "ResultRoot",
    "build_fallback",
    "build_output",
    "default_operation",
    "escape",
    "escape_text",
    "json_indent_level",
    "json_prefix",
    "json_raw",
    "new_root",
    "pretty_json",
    "render_output",
    "set_fatal_error",
    "set_json_indent_level",
    "set_json_prefix",
    "set_json_raw",
    "set_note",
    "set_warning",
]

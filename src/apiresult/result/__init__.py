# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/result/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result document: model, fallback document, and output builder.

- [`apiresult.result.model`][apiresult.result.model]: `ResultRoot` / `ItemList`.
- [`apiresult.result.fallback`][apiresult.result.fallback]: hand-built error document.
- [`apiresult.result.builder`][apiresult.result.builder]: `build_output` / `render_output`.
- [`apiresult.result.outcomes`][apiresult.result.outcomes]: `Encoded` / `Fallback`.
"""

from __future__ import annotations

from apiresult.result.builder import build_output, render_output
from apiresult.result.fallback import build_fallback
from apiresult.result.model import ItemList, ResultRoot, new_root
from apiresult.result.outcomes import Encoded, Fallback, OutputResult

__all__ = [
    "Encoded",
    "Fallback",
    "ItemList",
    "OutputResult",
    "ResultRoot",
    "build_fallback",
    "build_output",
    "new_root",
    "render_output",
]

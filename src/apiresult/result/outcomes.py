# topmark:header:start
#
#   project      : APIResult
#   file         : outcomes.py
#   file_relpath : src/apiresult/result/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged outcomes of building a result document.

`Encoded` text came from the structured encoder (pretty-printed, or raw when
raw mode is on or pretty-printing failed). `Fallback` text was hand-built
because the encoder failed. Both expose `text` and `success`, so callers do
not need to know which path produced the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Encoded:
    """Output produced by the structured encoder.

    Attributes:
        text: The JSON document.
        success: False when the document carries an error.
    """

    text: str
    success: bool


@dataclass(frozen=True, slots=True)
class Fallback:
    """Hand-built error document; always a failure."""

    text: str

    @property
    def success(self) -> bool:
        """Always False."""
        return False


OutputResult: TypeAlias = Encoded | Fallback

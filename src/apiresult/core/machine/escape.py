# topmark:header:start
#
#   project      : APIResult
#   file         : escape.py
#   file_relpath : src/apiresult/core/machine/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Escaping for text spliced into hand-built JSON fragments.

The fallback document is assembled with plain string concatenation because the
regular encoder has already failed by the time it is needed. Text embedded in
it must therefore be made safe by hand: every control byte (``<= 0x1f``) and
the double quote are replaced by a ``\u00XX`` escape.

Backslashes are left alone.
"""

from __future__ import annotations

from typing import Final

_HEX_DIGITS: Final[bytes] = b"0123456789abcdef"
_QUOTE: Final[int] = ord('"')


def _needs_escape(byte: int) -> bool:
    return byte <= 0x1F or byte == _QUOTE


def escape(data: bytes) -> bytes:
    r"""Replace control bytes and double quotes with ``\u00XX`` escapes.

    Args:
        data: Raw bytes (typically UTF-8 text).

    Returns:
        The escaped bytes. When nothing needs escaping, `data` itself is returned.
    """
    start: int = 0
    for start, byte in enumerate(data):
        if _needs_escape(byte):
            break
    else:
        return data

    out = bytearray(data[:start])
    for byte in data[start:]:
        if _needs_escape(byte):
            out += b"\\u00"
            out.append(_HEX_DIGITS[byte >> 4])
            out.append(_HEX_DIGITS[byte & 0x0F])
        else:
            out.append(byte)
    return bytes(out)


def escape_text(text: str) -> str:
    """Escape a `str` with [`escape`][apiresult.core.machine.escape.escape] (UTF-8 round trip)."""
    raw: bytes = text.encode("utf-8", errors="surrogatepass")
    escaped: bytes = escape(raw)
    if escaped is raw:
        return text
    return escaped.decode("utf-8", errors="surrogatepass")

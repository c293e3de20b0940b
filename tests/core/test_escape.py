# topmark:header:start
#
#   project      : APIResult
#   file         : test_escape.py
#   file_relpath : tests/core/test_escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the fallback-fragment escaper."""

from __future__ import annotations

import json
import re

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from apiresult.core.machine.escape import escape, escape_text

_ESCAPE_RE = re.compile(rb"\\u00([0-9a-f]{2})")


def _unescape(data: bytes) -> bytes:
    return _ESCAPE_RE.sub(lambda m: bytes([int(m.group(1), 16)]), data)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b'say "hi"', b"say \\u0022hi\\u0022"),
        (b"a\nb", b"a\\u000ab"),
        (b"\x00", b"\\u0000"),
        (b"\x1f\t", b"\\u001f\\u0009"),
        (b"tab\there", b"tab\\u0009here"),
    ],
)
def test_escape_replaces_control_and_quote_bytes(raw: bytes, expected: bytes) -> None:
    """Control bytes and quotes become lowercase \\u00XX escapes."""
    assert escape(raw) == expected


def test_escape_leaves_space_and_backslash_alone() -> None:
    """Only bytes <= 0x1f and the double quote are escaped."""
    data = b" \\ ~\x7f"
    assert escape(data) == data


def test_escape_returns_same_object_when_nothing_to_do() -> None:
    """No copy is made for clean input."""
    data = b"plain message"
    assert escape(data) is data
    assert escape(b"") == b""


def test_escape_text_keeps_non_ascii() -> None:
    """Multi-byte UTF-8 sequences pass through untouched."""
    assert escape_text('café "ok"') == "café \\u0022ok\\u0022"


def test_escaped_text_embeds_in_json_string() -> None:
    """An escaped message is a valid JSON string body that decodes to the original."""
    original = 'line 1\nline "2"\x01'
    decoded = json.loads('"' + escape_text(original) + '"')
    assert decoded == original


@given(st.binary())
def test_escape_output_has_no_raw_control_or_quote(data: bytes) -> None:
    """Property: no raw control byte or quote survives escaping."""
    escaped = escape(data)
    assert all(b > 0x1F and b != ord('"') for b in escaped)


@given(st.binary())
def test_escape_is_reversible(data: bytes) -> None:
    """Property: decoding the \\u00XX sequences recovers the input.

    Backslashes pass through unescaped, so inputs that already contain a
    literal ``\\u00`` sequence are ambiguous and skipped.
    """
    assume(b"\\u00" not in data)
    assert _unescape(escape(data)) == data


_CLEAN_BYTES = st.lists(
    st.integers(min_value=0x20, max_value=0xFF).filter(lambda b: b != 0x22)
).map(bytes)


@given(_CLEAN_BYTES)
def test_escape_is_identity_on_clean_input(data: bytes) -> None:
    """Property: clean input is returned unchanged (same object)."""
    assert escape(data) is data

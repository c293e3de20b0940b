# topmark:header:start
#
#   project      : APIResult
#   file         : formatter.py
#   file_relpath : src/apiresult/core/machine/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pretty-printing of already-encoded JSON.

[`pretty_json`][apiresult.core.machine.formatter.pretty_json] takes the compact
bytes produced by the encoder (or the hand-built fallback fragment) and applies
the indentation policy from [`FormatOptions`][apiresult.config.settings.FormatOptions]:

- raw mode returns the bytes as text, untouched;
- otherwise every line after the first starts with `prefix` followed by one
  indent unit per nesting level, and a trailing ``\n`` is appended.

Only whitespace between tokens changes. String and number tokens are copied
through byte for byte, so escapes such as ``\ud800`` and duplicate keys
survive as written.

Input that is not well-formed JSON raises
[`FormatError`][apiresult.core.errors.FormatError].
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Final, NoReturn

from apiresult.config.logging import get_logger
from apiresult.config.settings import current_options
from apiresult.core.errors import FormatError

if TYPE_CHECKING:
    from apiresult.config.logging import ResultLogger
    from apiresult.config.settings import FormatOptions

logger: ResultLogger = get_logger(__name__)

_STRING_TOKEN: Final[re.Pattern[str]] = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[ \t\r\n]*")
_CLOSING: Final[dict[str, str]] = {"[": "]", "{": "}"}


def _reject_constant(token: str) -> NoReturn:
    # `json.loads` accepts NaN/Infinity, strict JSON does not
    raise ValueError(f"invalid JSON token {token!r}")


def _skip_whitespace(text: str, pos: int) -> int:
    match = _WHITESPACE.match(text, pos)
    return match.end() if match is not None else pos


def _validate(data: bytes) -> str:
    try:
        text: str = data.decode("utf-8")
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.debug("Cannot indent %d bytes of JSON: %s", len(data), exc)
        raise FormatError(str(exc)) from exc
    return text


def _reindent(text: str, prefix: str, unit: str) -> str:
    """Re-indent a well-formed JSON document (the `json.Indent` layout)."""
    out: list[str] = []
    newline: str = "\n" + prefix
    depth: int = 0
    pos: int = _skip_whitespace(text, 0)
    while pos < len(text):
        ch: str = text[pos]
        if ch == '"':
            match = _STRING_TOKEN.match(text, pos)
            if match is None:
                raise FormatError(f"unterminated string at offset {pos}")
            out.append(match.group())
            pos = match.end()
            continue
        pos += 1
        if ch in _CLOSING:
            after: int = _skip_whitespace(text, pos)
            if after < len(text) and text[after] == _CLOSING[ch]:
                # empty containers stay on one line
                out.append(ch + _CLOSING[ch])
                pos = after + 1
                continue
            depth += 1
            out.append(ch + newline + unit * depth)
        elif ch in "]}":
            depth -= 1
            out.append(newline + unit * depth + ch)
        elif ch == ",":
            out.append(ch + newline + unit * depth)
        elif ch == ":":
            out.append(": ")
        elif ch not in " \t\r\n":
            out.append(ch)
    return "".join(out)


def pretty_json(
    data: bytes,
    prefix: str | None = None,
    indent: str | None = None,
    *,
    options: FormatOptions | None = None,
) -> str:
    r"""Pretty-print encoded JSON according to the formatter settings.

    Args:
        data: Encoded JSON bytes.
        prefix: Line prefix override (defaults to the settings' `prefix`).
        indent: Indent unit override (defaults to `indent_level` spaces).
        options: Explicit settings; defaults to the process-wide current settings.

    Returns:
        The raw text in raw mode, otherwise the indented document ending with ``\n``.

    Raises:
        FormatError: If `data` is not well-formed UTF-8 JSON, or the prefix or
            indent unit cannot be written as UTF-8.
    """
    opts: FormatOptions = options if options is not None else current_options()
    if opts.raw:
        return data.decode("utf-8", errors="replace")

    line_prefix: str = opts.prefix if prefix is None else prefix
    unit: str = opts.indent_unit if indent is None else indent

    text: str = _reindent(_validate(data), line_prefix, unit) + "\n"
    try:
        # prefixes taken from the environment may carry surrogate escapes
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise FormatError(f"prefix or indent is not valid text: {exc}") from exc
    return text

# topmark:header:start
#
#   project      : APIResult
#   file         : settings.py
#   file_relpath : src/apiresult/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter settings: indentation width, line prefix, and raw mode.

Settings are modelled by the immutable [`FormatOptions`][apiresult.config.settings.FormatOptions].
A process-wide *current* value backs the module-level getters/setters
(`json_indent_level()`, `set_json_prefix()`, ...); callers that need isolated
settings pass their own `FormatOptions` explicitly instead.

Sources, from lowest to highest precedence (resolved by the CLI):
    1. built-in defaults (`indent_level=2`, `prefix=""`, `raw=False`),
    2. a TOML file (see [`apiresult.config.io`][apiresult.config.io]),
    3. ``APIRESULT_JSON_INDENT`` / ``APIRESULT_JSON_PREFIX`` / ``APIRESULT_JSON_RAW``,
    4. explicit command-line options.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Final

from apiresult.config.logging import get_logger
from apiresult.constants import (
    DEFAULT_JSON_INDENT_LEVEL,
    DEFAULT_JSON_PREFIX,
    ENV_JSON_INDENT,
    ENV_JSON_PREFIX,
    ENV_JSON_RAW,
)
from apiresult.core.errors import ConfigError

logger = get_logger(__name__)

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Pretty-printing policy applied to encoded JSON.

    Attributes:
        indent_level: Number of spaces per nesting level.
        prefix: String written at the start of every line after the first.
        raw: When True, encoded JSON is returned verbatim (no pretty-printing).
    """

    indent_level: int = DEFAULT_JSON_INDENT_LEVEL
    prefix: str = DEFAULT_JSON_PREFIX
    raw: bool = False

    def __post_init__(self) -> None:
        if self.indent_level < 0:
            raise ConfigError(f"JSON indent level must be >= 0, got {self.indent_level}")

    @property
    def indent_unit(self) -> str:
        """One indentation step: `indent_level` spaces."""
        return "".ljust(self.indent_level)


_current: FormatOptions = FormatOptions()


def current_options() -> FormatOptions:
    """Return the process-wide formatter settings."""
    return _current


def apply_options(options: FormatOptions) -> None:
    """Replace the process-wide formatter settings."""
    global _current
    logger.debug("Formatter settings: %r", options)
    _current = options


def json_indent_level() -> int:
    """Return the current number of spaces per indentation step (defaults to 2)."""
    return _current.indent_level


def set_json_indent_level(level: int) -> None:
    """Change the number of spaces per indentation step.

    Raises:
        ConfigError: If `level` is negative.
    """
    apply_options(replace(_current, indent_level=level))


def json_prefix() -> str:
    """Return the current line prefix (defaults to the empty string)."""
    return _current.prefix


def set_json_prefix(prefix: str) -> None:
    """Change the line prefix used when pretty-printing."""
    apply_options(replace(_current, prefix=prefix))


def json_raw() -> bool:
    """Return True when raw output mode is active (pretty-printing disabled)."""
    return _current.raw


def set_json_raw(raw: bool) -> None:
    """Enable or disable raw output mode."""
    apply_options(replace(_current, raw=raw))


def parse_bool(value: str, *, source: str) -> bool:
    """Parse a boolean flag given as text (``1/0``, ``true/false``, ``yes/no``, ``on/off``).

    Args:
        value: Text to parse (case-insensitive, surrounding whitespace ignored).
        source: Where the value came from, for error messages.

    Returns:
        The parsed flag.

    Raises:
        ConfigError: If `value` is not a recognized boolean spelling.
    """
    v: str = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    raise ConfigError(f"{source}: expected a boolean, got {value!r}")


def parse_indent_level(value: str, *, source: str) -> int:
    """Parse a non-negative indentation width given as text.

    Raises:
        ConfigError: If `value` is not a non-negative integer.
    """
    try:
        level: int = int(value.strip())
    except ValueError as exc:
        raise ConfigError(f"{source}: expected a non-negative integer, got {value!r}") from exc
    if level < 0:
        raise ConfigError(f"{source}: expected a non-negative integer, got {value!r}")
    return level


def resolve_env_format_options(base: FormatOptions | None = None) -> FormatOptions:
    """Overlay the ``APIRESULT_JSON_*`` environment variables on `base`.

    Unset variables leave the corresponding field of `base` unchanged.

    Args:
        base: Starting settings; defaults to the process-wide current settings.

    Returns:
        The resolved settings.

    Raises:
        ConfigError: If a variable is set to an invalid value.
    """
    options: FormatOptions = base if base is not None else _current

    indent: str | None = os.environ.get(ENV_JSON_INDENT)
    if indent is not None:
        options = replace(options, indent_level=parse_indent_level(indent, source=ENV_JSON_INDENT))

    prefix: str | None = os.environ.get(ENV_JSON_PREFIX)
    if prefix is not None:
        options = replace(options, prefix=prefix)

    raw: str | None = os.environ.get(ENV_JSON_RAW)
    if raw is not None:
        options = replace(options, raw=parse_bool(raw, source=ENV_JSON_RAW))

    return options

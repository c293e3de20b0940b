# topmark:header:start
#
#   project      : APIResult
#   file         : io.py
#   file_relpath : src/apiresult/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load formatter settings from TOML files.

Two layouts are recognized:

- a dedicated file (e.g. ``apiresult.toml``) with a top-level ``[json]`` table,
- ``pyproject.toml`` with a ``[tool.apiresult.json]`` table.

Example:

```toml
[json]
indent = 4
prefix = ""
raw = false
```

Parsing is done with `tomlkit` and unwrapped to plain `dict` structures.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from apiresult.config.logging import get_logger
from apiresult.config.settings import FormatOptions, current_options
from apiresult.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from apiresult.config.logging import ResultLogger

logger: ResultLogger = get_logger(__name__)

TomlTable = dict[str, Any]

PYPROJECT_TOML: Final[str] = "pyproject.toml"

SECTION_JSON: Final[str] = "json"
KEY_INDENT: Final[str] = "indent"
KEY_PREFIX: Final[str] = "prefix"
KEY_RAW: Final[str] = "raw"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _get_table(table: TomlTable, key: str) -> TomlTable:
    value: Any = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def find_json_table(doc: TomlTable, *, for_pyproject: bool) -> TomlTable:
    """Return the table holding formatter settings (empty if absent)."""
    if for_pyproject:
        tool: TomlTable = _get_table(doc, "tool")
        return _get_table(_get_table(tool, "apiresult"), SECTION_JSON)
    return _get_table(doc, SECTION_JSON)


def format_options_from_table(
    table: TomlTable,
    base: FormatOptions | None = None,
) -> FormatOptions:
    """Overlay the keys of a ``[json]`` table on `base`.

    Args:
        table: The unwrapped ``[json]`` table.
        base: Starting settings; defaults to the process-wide current settings.

    Returns:
        The resolved settings.

    Raises:
        ConfigError: If a key has the wrong type or an out-of-range value.
    """
    options: FormatOptions = base if base is not None else current_options()

    if KEY_INDENT in table:
        indent: Any = table[KEY_INDENT]
        # bool is an int subclass; reject it explicitly
        if isinstance(indent, bool) or not isinstance(indent, int):
            raise ConfigError(f"json.{KEY_INDENT} must be an integer, got {indent!r}")
        options = replace(options, indent_level=indent)

    if KEY_PREFIX in table:
        prefix: Any = table[KEY_PREFIX]
        if not isinstance(prefix, str):
            raise ConfigError(f"json.{KEY_PREFIX} must be a string, got {prefix!r}")
        options = replace(options, prefix=prefix)

    if KEY_RAW in table:
        raw: Any = table[KEY_RAW]
        if not isinstance(raw, bool):
            raise ConfigError(f"json.{KEY_RAW} must be a boolean, got {raw!r}")
        options = replace(options, raw=raw)

    unknown: list[str] = sorted(set(table) - {KEY_INDENT, KEY_PREFIX, KEY_RAW})
    if unknown:
        logger.warning("Ignoring unknown json settings: %s", ", ".join(unknown))

    return options


def load_format_options(path: Path, base: FormatOptions | None = None) -> FormatOptions:
    """Read formatter settings from a TOML file.

    Args:
        path: ``pyproject.toml`` (uses ``[tool.apiresult.json]``) or any other
            TOML file (uses ``[json]``).
        base: Starting settings; defaults to the process-wide current settings.

    Returns:
        The resolved settings; `base` unchanged when the file has no matching table.

    Raises:
        ConfigError: If the file is unreadable or holds invalid settings.
    """
    doc: TomlTable = load_toml_dict(path)
    table: TomlTable = find_json_table(doc, for_pyproject=path.name == PYPROJECT_TOML)
    logger.debug("Loaded json settings from %s: %r", path, table)
    return format_options_from_table(table, base)

# topmark:header:start
#
#   project      : APIResult
#   file         : cmd_common.py
#   file_relpath : src/apiresult/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by APIResult CLI commands."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import IO, TYPE_CHECKING, Any, Final, cast

import click

from apiresult.cli.errors import ApiResultConfigError, ApiResultDataError
from apiresult.cli.exit_codes import ExitCode
from apiresult.config.io import load_format_options
from apiresult.config.logging import get_logger
from apiresult.config.settings import FormatOptions, resolve_env_format_options
from apiresult.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from apiresult.config.logging import ResultLogger

logger: ResultLogger = get_logger(__name__)

# API version of the documents the CLI emits about itself (e.g. `version --json`)
CLI_API_VERSION: Final[str] = "1.0"


def resolve_format_options(
    *,
    config_file: Path | None,
    raw: bool | None,
    indent: int | None,
    prefix: str | None,
) -> FormatOptions:
    """Resolve formatter settings: defaults < config file < environment < options.

    Args:
        config_file: Optional TOML file.
        raw: ``--raw/--pretty`` (None when not given).
        indent: ``--indent`` (None when not given).
        prefix: ``--prefix`` (None when not given).

    Returns:
        The effective settings.

    Raises:
        ApiResultConfigError: If the config file or environment holds invalid settings.
    """
    try:
        options: FormatOptions = FormatOptions()
        if config_file is not None:
            options = load_format_options(config_file, options)
        options = resolve_env_format_options(options)
    except ConfigError as exc:
        raise ApiResultConfigError(str(exc)) from exc

    if raw is not None:
        options = replace(options, raw=raw)
    if indent is not None:
        options = replace(options, indent_level=indent)
    if prefix is not None:
        options = replace(options, prefix=prefix)
    logger.debug("Effective formatter settings: %r", options)
    return options


def load_items(stream: IO[str]) -> list[object]:
    """Read a JSON array of items.

    Args:
        stream: Open text stream (file or stdin).

    Returns:
        The decoded items.

    Raises:
        ApiResultDataError: If the input is not valid JSON or not an array.
    """
    name: str = getattr(stream, "name", "<stream>")
    try:
        doc: Any = json.load(stream)
    except json.JSONDecodeError as exc:
        raise ApiResultDataError(f"{name}: invalid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ApiResultDataError(f"{name}: not valid UTF-8: {exc}") from exc
    if not isinstance(doc, list):
        raise ApiResultDataError(f"{name}: expected a JSON array of items, got {type(doc).__name__}")
    return cast("list[object]", doc)


def emit_document(text: str, success: bool) -> None:
    """Print a result document and exit with FAILURE when it reports an error."""
    click.echo(text, nl=not text.endswith("\n"))
    if not success:
        click.get_current_context().exit(ExitCode.FAILURE)

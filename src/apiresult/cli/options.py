# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/apiresult/cli/options.py
#   project      : APIResult
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, formatter settings) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from apiresult.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the log level requested with ``-v`` / ``-q`` flags.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or None when neither flag was given.

    Raises:
        click.UsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise click.UsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr (repeat up to three times).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical problems.",
    )(f)
    return f


def format_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add formatter settings options (--config, --raw, --indent, --prefix).

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="TOML file with a [json] table (or pyproject.toml with [tool.apiresult.json]).",
    )(f)
    f = click.option(
        "--raw/--pretty",
        "raw",
        default=None,
        help="Emit compact JSON instead of pretty-printing it.",
    )(f)
    f = click.option(
        "--indent",
        "indent",
        type=click.IntRange(min=0),
        default=None,
        help="Spaces per indentation level (default: 2).",
    )(f)
    f = click.option(
        "--prefix",
        "prefix",
        default=None,
        help="String written at the start of every line after the first.",
    )(f)
    return f

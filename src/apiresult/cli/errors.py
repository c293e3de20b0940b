# topmark:header:start
#
#   project      : APIResult
#   file         : errors.py
#   file_relpath : src/apiresult/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the APIResult CLI.

Raise these in commands to abort with a standardized message and exit code.
They only cover problems with the command's *inputs*; a result document that
reports an error is still printed normally.
"""

from __future__ import annotations

import click

from apiresult.cli.exit_codes import ExitCode


class ApiResultCliError(click.ClickException):
    """Base class for all APIResult CLI errors."""

    exit_code = ExitCode.FAILURE


class ApiResultDataError(ApiResultCliError):
    """Error for item input that is not a JSON array."""

    exit_code = ExitCode.DATA_ERROR


class ApiResultConfigError(ApiResultCliError):
    """Error for invalid formatter settings (file, environment, or options)."""

    exit_code = ExitCode.CONFIG_ERROR

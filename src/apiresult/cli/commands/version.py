# topmark:header:start
#
#   project      : APIResult
#   file         : version.py
#   file_relpath : src/apiresult/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""APIResult `version` command.

Prints the APIResult version as installed in the active Python environment,
either as plain text or as a result document of kind ``version``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apiresult.cli.cmd_common import CLI_API_VERSION, emit_document, resolve_format_options
from apiresult.constants import APIRESULT, APIRESULT_VERSION
from apiresult.diagnostic.accumulators import OperationContext
from apiresult.result.builder import build_output

if TYPE_CHECKING:
    from apiresult.config.settings import FormatOptions


@click.command(
    name="version",
    help="Show the current version of APIResult.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print a result document instead of plain text.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of APIResult."""
    if not as_json:
        click.echo(APIRESULT_VERSION)
        return

    options: FormatOptions = resolve_format_options(
        config_file=None,
        raw=None,
        indent=None,
        prefix=None,
    )
    text, success = build_output(
        CLI_API_VERSION,
        "version",
        "version",
        "",
        ["tool", "version"],
        [{"tool": APIRESULT, "version": APIRESULT_VERSION}],
        operation=OperationContext(),
        options=options,
    )
    emit_document(text, success)

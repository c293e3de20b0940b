# topmark:header:start
#
#   project      : APIResult
#   file         : render.py
#   file_relpath : src/apiresult/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""APIResult `render` command.

Reads a JSON array of items (from a file or stdin) and prints the result
document wrapping them. Diagnostics given with ``--note``, ``--warning`` and
``--error`` are latched on a fresh operation context before the document is
built, exactly as a host program's producers would.

Exit status is taken from the builder's success flag.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from apiresult.cli.cmd_common import emit_document, load_items, resolve_format_options
from apiresult.cli.options import format_options
from apiresult.config.logging import get_logger
from apiresult.diagnostic.accumulators import OperationContext
from apiresult.diagnostic.model import Message, MessageLevel
from apiresult.result.builder import render_output

if TYPE_CHECKING:
    from pathlib import Path

    from apiresult.config.logging import ResultLogger
    from apiresult.config.settings import FormatOptions
    from apiresult.result.outcomes import OutputResult

logger: ResultLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Wrap a JSON array of items (ITEMS_FILE, or '-' for stdin) in a result document.",
)
@click.argument(
    "items_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
)
@click.option(
    "--api-version",
    default=None,
    help="API version of the document (falls back to $APIRESULT_APIVER).",
)
@click.option("--context", default="", help="Command context, e.g. 'globs'.")
@click.option("--kind", default="", help="Kind of the items, e.g. 'env'.")
@click.option(
    "--item-verbosity",
    default="",
    help="Verbosity label the items were produced with.",
)
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    help="Field name present in each item (repeatable, in order).",
)
@click.option("--note", default=None, help="Attach a note to the document.")
@click.option("--warning", default=None, help="Attach a warning to the document.")
@click.option(
    "--error",
    default=None,
    help="Latch a fatal error: the document reports failure and omits the items.",
)
@click.option(
    "--code",
    type=int,
    default=0,
    help="Code attached to --note/--warning/--error messages.",
)
@format_options
def render_command(
    *,
    items_file: IO[str],
    api_version: str | None,
    context: str,
    kind: str,
    item_verbosity: str,
    fields: tuple[str, ...],
    note: str | None,
    warning: str | None,
    error: str | None,
    code: int,
    config_file: Path | None,
    raw: bool | None,
    indent: int | None,
    prefix: str | None,
) -> None:
    """Render a result document for the given items."""
    options: FormatOptions = resolve_format_options(
        config_file=config_file,
        raw=raw,
        indent=indent,
        prefix=prefix,
    )
    items: list[object] = load_items(items_file)
    logger.info("Rendering %d item(s) of kind %r", len(items), kind)

    operation = OperationContext()
    if note:
        operation.set_note(Message(note, code=code, level=MessageLevel.NOTE))
    if warning:
        operation.set_warning(Message(warning, code=code, level=MessageLevel.ISSUE))
    if error:
        operation.set_fatal_error(Message(error, code=code, level=MessageLevel.FATAL))

    result: OutputResult = render_output(
        api_version,
        context,
        kind,
        item_verbosity,
        list(fields),
        items,
        operation=operation,
        options=options,
    )
    emit_document(result.text, result.success)

# topmark:header:start
#
#   project      : APIResult
#   file         : main.py
#   file_relpath : src/apiresult/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""APIResult CLI entry point.

Group-level options (log verbosity) are resolved once and placed into
``ctx.obj``; subcommands print to stdout and log to stderr.
"""

from __future__ import annotations

import click

from apiresult.cli.commands.render import render_command
from apiresult.cli.commands.version import version_command
from apiresult.cli.options import common_verbose_options, resolve_verbosity
from apiresult.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (log level) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.ensure_object(dict)

    # -v/-q win over APIRESULT_LOG_LEVEL
    level: int | None = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="APIResult CLI: build versioned JSON result documents.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the APIResult CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(render_command)

cli.add_command(version_command)

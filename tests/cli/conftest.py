# topmark:header:start
#
#   project      : APIResult
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking the `apiresult` Click group."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from apiresult.cli.exit_codes import ExitCode
from apiresult.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. `["render", "items.json"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    return CliRunner().invoke(cli, list(argv), input=input_text)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the exit code, showing the output on mismatch."""
    assert result.exit_code == code, (
        f"expected exit {int(code)}, got {result.exit_code}\n{result.output}"
    )


def stdout_json(result: Result) -> dict[str, Any]:
    """Parse the document printed on stdout."""
    doc: Any = json.loads(result.stdout)
    assert isinstance(doc, dict)
    return doc

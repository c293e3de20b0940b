# topmark:header:start
#
#   project      : APIResult
#   file         : __main__.py
#   file_relpath : src/apiresult/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running APIResult via ``python -m apiresult``.

Delegates to :func:`apiresult.cli.main.cli`, the same entry point as the
``apiresult`` console script.

Examples:
    Render a result document from a JSON item file::

        python -m apiresult render --api-version 1.0 items.json
"""

from __future__ import annotations

from apiresult.cli.main import cli

if __name__ == "__main__":
    cli()

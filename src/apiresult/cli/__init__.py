# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for APIResult.

The CLI is a thin host around the library: it reads items, latches any
diagnostics given on the command line, and prints the document built by
[`apiresult.result.builder`][apiresult.result.builder].
"""

from __future__ import annotations

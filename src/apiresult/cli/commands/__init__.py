# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click commands registered on the `apiresult` group."""

from __future__ import annotations

# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across APIResult.

Included modules:

- ``errors``
  The exception hierarchy used by the encoder, formatter, and config layers.

- ``machine``
  JSON wire keys, the structured encoder, the pretty-printer, and the
  escaper used by the hand-built fallback document.

This package is free of Click and console dependencies.
"""

from __future__ import annotations

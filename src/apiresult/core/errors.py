# topmark:header:start
#
#   project      : APIResult
#   file         : errors.py
#   file_relpath : src/apiresult/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the APIResult building blocks.

These never reach callers of [`build_output`][apiresult.result.builder.build_output]:
the output builder resolves every one of them into a JSON payload plus a
success flag. They are raised by the lower layers (encoder, formatter, config
loader) so each layer can be used and tested on its own.
"""

from __future__ import annotations


class ApiResultError(Exception):
    """Base class for all APIResult errors."""


class EncodeError(ApiResultError):
    """The result root (or one of its items) could not be encoded as JSON."""


class FormatError(ApiResultError):
    """Encoded bytes could not be re-indented (not well-formed JSON)."""


class ConfigError(ApiResultError):
    """Formatter settings are missing, malformed, or out of range."""

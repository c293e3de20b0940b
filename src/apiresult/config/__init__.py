# topmark:header:start
#
#   project      : APIResult
#   file         : __init__.py
#   file_relpath : src/apiresult/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for APIResult: formatter settings and logging.

- [`apiresult.config.settings`][apiresult.config.settings]: `FormatOptions`,
  process-wide getters/setters, environment overrides.
- [`apiresult.config.io`][apiresult.config.io]: TOML loading via `tomlkit`.
- [`apiresult.config.logging`][apiresult.config.logging]: TRACE level and
  colored log output.
"""

from __future__ import annotations

from apiresult.config.settings import FormatOptions

__all__ = ["FormatOptions"]

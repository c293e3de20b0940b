# topmark:header:start
#
#   project      : APIResult
#   file         : constants.py
#   file_relpath : src/apiresult/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""APIResult Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

APIRESULT: Final[str] = "apiresult"
APIRESULT_VERSION: str = get_version("apiresult")

# Environment variables
ENV_API_VERSION: Final[str] = "APIRESULT_APIVER"
ENV_JSON_INDENT: Final[str] = "APIRESULT_JSON_INDENT"
ENV_JSON_PREFIX: Final[str] = "APIRESULT_JSON_PREFIX"
ENV_JSON_RAW: Final[str] = "APIRESULT_JSON_RAW"
ENV_LOG_LEVEL: Final[str] = "APIRESULT_LOG_LEVEL"

# Placeholder API version used when none could be resolved
UNKNOWN_API_VERSION: Final[str] = "?.?"

# Status ids carried in the result root
ID_SUCCESS: Final[int] = 0
ID_FAILURE: Final[int] = -1

# Diagnostic codes raised by the output builder itself
CODE_MISSING_API_VERSION: Final[int] = 1001
CODE_ENCODE_FAILED: Final[int] = 1002
CODE_FORMAT_FAILED: Final[int] = 1003

DEFAULT_JSON_INDENT_LEVEL: Final[int] = 2
DEFAULT_JSON_PREFIX: Final[str] = ""

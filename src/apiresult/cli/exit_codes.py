# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/apiresult/cli/exit_codes.py
#   project      : APIResult
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the APIResult CLI.

Aligned with the BSD `sysexits` convention where practical. A result document
that carries an error exits with `FAILURE`; problems reading the command's own
inputs use the sysexits values.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the APIResult CLI.

    Attributes:
        SUCCESS: The result document reports success.
        FAILURE: The result document carries an error (id -1).
        USAGE_ERROR: Click usage error (invalid flags/args). Click's own value.
        DATA_ERROR: Item input is not a JSON array. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Invalid formatter settings. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    DATA_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG

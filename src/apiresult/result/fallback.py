# topmark:header:start
#
#   project      : APIResult
#   file         : fallback.py
#   file_relpath : src/apiresult/result/fallback.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hand-built error document used when structured encoding fails.

The fragment is assembled with string concatenation only, so it does not
depend on the encoder that just failed:

```
{ "apiVersion":"<version>", "id": -1, "note": {...}, "warning": {...}, "error": {...} }
```

Every embedded string goes through the escaper first. The fragment is then
pretty-printed when possible; if that fails the unformatted fragment is
returned. [`build_fallback`][apiresult.result.fallback.build_fallback] never
raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apiresult.config.logging import get_logger
from apiresult.constants import ID_FAILURE
from apiresult.core.errors import FormatError
from apiresult.core.machine.escape import escape_text
from apiresult.core.machine.formatter import pretty_json
from apiresult.core.machine.schemas import ApiKey, MessageKey

if TYPE_CHECKING:
    from apiresult.config.logging import ResultLogger
    from apiresult.config.settings import FormatOptions
    from apiresult.diagnostic.model import Message

logger: ResultLogger = get_logger(__name__)


def _message_fragment(flavor: str, msg: Message) -> str:
    return (
        f'"{flavor}": {{ '
        f'"{MessageKey.MESSAGE}": "{escape_text(msg.message)}", '
        f'"{MessageKey.CODE}": {int(msg.code)}, '
        f'"{MessageKey.LEVEL}": "{escape_text(msg.level)}" }}'
    )


def build_fallback_fragment(
    api_version: str,
    error: Message,
    *,
    note: Message | None = None,
    warning: Message | None = None,
) -> str:
    """Assemble the unformatted fallback fragment.

    Args:
        api_version: Version to report (escaped before embedding).
        error: The error that made structured encoding fail.
        note: Optional note, emitted ahead of the error.
        warning: Optional warning, emitted ahead of the error.

    Returns:
        A single-line JSON object.
    """
    parts: list[str] = []
    if note is not None and note.is_set:
        parts.append(_message_fragment(ApiKey.NOTE, note))
    if warning is not None and warning.is_set:
        parts.append(_message_fragment(ApiKey.WARNING, warning))
    parts.append(_message_fragment(ApiKey.ERROR, error))
    return (
        f'{{ "{ApiKey.API_VERSION}":"{escape_text(api_version)}", '
        f'"{ApiKey.ID}": {ID_FAILURE}, ' + ", ".join(parts) + " }"
    )


def build_fallback(
    api_version: str,
    error: Message,
    *,
    note: Message | None = None,
    warning: Message | None = None,
    options: FormatOptions | None = None,
) -> str:
    """Build the fallback error document, pretty-printed when possible.

    Args:
        api_version: Version to report.
        error: The error that made structured encoding fail.
        note: Optional note to include.
        warning: Optional warning to include.
        options: Formatter settings; defaults to the process-wide settings.

    Returns:
        The fallback document (unformatted if pretty-printing failed).
    """
    fragment: str = build_fallback_fragment(api_version, error, note=note, warning=warning)
    try:
        return pretty_json(fragment.encode("utf-8", errors="replace"), options=options)
    except FormatError as exc:
        logger.warning("Returning unformatted fallback document: %s", exc)
        return fragment

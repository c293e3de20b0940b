# topmark:header:start
#
#   project      : APIResult
#   file         : builder.py
#   file_relpath : src/apiresult/result/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble the final result document for a command.

[`render_output`][apiresult.result.builder.render_output] combines the API
version, the command context, the item list, and the diagnostics latched on an
[`OperationContext`][apiresult.diagnostic.accumulators.OperationContext] into
one JSON document. It always returns text:

1. no API version (argument or ``APIRESULT_APIVER``) -> error 1001;
2. a latched fatal error wins over the item list (data section omitted);
3. structured encoding failure -> error 1002 and the hand-built fallback document;
4. pretty-printing failure -> warning 1003 and the unformatted document.

[`build_output`][apiresult.result.builder.build_output] returns the same
outcome as a ``(text, success)`` tuple.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from apiresult.config.logging import get_logger
from apiresult.constants import (
    CODE_ENCODE_FAILED,
    CODE_FORMAT_FAILED,
    CODE_MISSING_API_VERSION,
    ENV_API_VERSION,
    ID_FAILURE,
    UNKNOWN_API_VERSION,
)
from apiresult.core.errors import EncodeError, FormatError
from apiresult.core.machine.formatter import pretty_json
from apiresult.core.machine.serializers import encode_json
from apiresult.diagnostic.accumulators import default_operation
from apiresult.diagnostic.model import Message, MessageLevel
from apiresult.result.fallback import build_fallback
from apiresult.result.model import new_root
from apiresult.result.outcomes import Encoded, Fallback

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apiresult.config.logging import ResultLogger
    from apiresult.config.settings import FormatOptions
    from apiresult.diagnostic.accumulators import OperationContext
    from apiresult.result.model import ResultRoot
    from apiresult.result.outcomes import OutputResult

logger: ResultLogger = get_logger(__name__)


def resolve_api_version(api_version: str | None) -> str | None:
    """Return `api_version`, or the ``APIRESULT_APIVER`` fallback, or None."""
    if api_version:
        return api_version
    env_version: str | None = os.environ.get(ENV_API_VERSION)
    if env_version:
        logger.debug("Using API version %r from %s", env_version, ENV_API_VERSION)
        return env_version
    return None


def _fallback(
    root: ResultRoot,
    error: Message,
    warning: Message | None,
    options: FormatOptions | None,
) -> Fallback:
    logger.warning("Emitting fallback document: %s", error.message)
    return Fallback(
        build_fallback(
            root.api_version,
            error,
            note=root.note,
            warning=warning,
            options=options,
        )
    )


def render_output(
    api_version: str | None,
    context: str,
    kind: str,
    verbosity: str,
    fields: Sequence[str],
    items: Sequence[object],
    *,
    operation: OperationContext | None = None,
    options: FormatOptions | None = None,
) -> OutputResult:
    """Build the result document and report which path produced it.

    Args:
        api_version: API version; falls back to ``APIRESULT_APIVER`` when empty.
        context: Command context (e.g. ``"globs"``); omitted when empty.
        kind: Kind of the items (omitted when empty).
        verbosity: Verbosity label of the items (omitted when empty).
        fields: Field names present in each item.
        items: Already-serializable items.
        operation: Latched diagnostics; defaults to the process-wide context.
        options: Formatter settings; defaults to the process-wide settings.

    Returns:
        `Encoded` when the structured encoder succeeded, `Fallback` otherwise.
    """
    op: OperationContext = operation if operation is not None else default_operation()

    error: Message | None = None
    resolved: str | None = resolve_api_version(api_version)
    if resolved is None:
        error = Message(
            "No API version was available to build the result document, failing",
            code=CODE_MISSING_API_VERSION,
            level=MessageLevel.FATAL,
        )
        resolved = UNKNOWN_API_VERSION

    root: ResultRoot = new_root(resolved, context)

    if error is None:
        error = op.fatal_error

    if error is None:
        # warning and note are carried only when no fatal condition exists
        root.set_items(kind, verbosity, fields, items)
        root.note = op.note
        root.warning = op.warning
    else:
        logger.debug("Result carries error %d: %s", error.code, error.message)
        root.id = ID_FAILURE
        root.error = error

    try:
        encoded: bytes = encode_json(root)
    except EncodeError as exc:
        if root.error is None:
            root.error = Message(
                f"Failed to convert {context} ({kind}) items to JSON: {exc}",
                code=CODE_ENCODE_FAILED,
                level=MessageLevel.FATAL,
            )
        return _fallback(root, root.error, root.warning, options)

    success: bool = root.error is None
    try:
        return Encoded(pretty_json(encoded, options=options), success)
    except FormatError as exc:
        logger.warning("Unable to beautify JSON output: %s", exc)
        format_warning = Message(
            f"Unable to beautify JSON output: {exc}",
            code=CODE_FORMAT_FAILED,
            level=MessageLevel.ISSUE,
        )
        stacked: Message = format_warning.stacked_on(root.warning)
        root.warning = stacked

    try:
        encoded = encode_json(root)
    except EncodeError as exc:
        logger.error("Re-encoding after format failure failed: %s", exc)
        escalated: Message = stacked.with_level(MessageLevel.FATAL)
        if root.error is not None:
            return _fallback(root, root.error, escalated, options)
        return _fallback(root, escalated, None, options)

    try:
        return Encoded(pretty_json(encoded, options=options), success)
    except FormatError as exc:
        logger.warning("Returning unformatted JSON output: %s", exc)
        return Encoded(encoded.decode("utf-8", errors="replace"), success)


def build_output(
    api_version: str | None,
    context: str,
    kind: str,
    verbosity: str,
    fields: Sequence[str],
    items: Sequence[object],
    *,
    operation: OperationContext | None = None,
    options: FormatOptions | None = None,
) -> tuple[str, bool]:
    """Build the result document text and success flag.

    The success flag, not the text, decides the caller's exit status.

    See [`render_output`][apiresult.result.builder.render_output] for the
    arguments.

    Returns:
        ``(text, success)``.
    """
    result: OutputResult = render_output(
        api_version,
        context,
        kind,
        verbosity,
        fields,
        items,
        operation=operation,
        options=options,
    )
    return result.text, result.success

# topmark:header:start
#
#   project      : APIResult
#   file         : accumulators.py
#   file_relpath : src/apiresult/diagnostic/accumulators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Latched diagnostics for one logical operation.

Producers anywhere in a program record the most recent fatal error, warning,
and note on an [`OperationContext`][apiresult.diagnostic.accumulators.OperationContext];
the output builder reads them once when it assembles the result document.

Policies:
    * fatal error: plain overwrite.
    * warning / note: additive. A new message is stacked on the latched one
      (see [`Message.stacked_on`][apiresult.diagnostic.model.Message.stacked_on]),
      so the text reads newest-first with no separator.

A process-wide default context backs the module-level setters. It is never
cleared; a one-shot command-line process uses it for its single operation.
Hosts running several operations (or threads) create one `OperationContext`
per operation and pass it to the builder explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apiresult.config.logging import get_logger

if TYPE_CHECKING:
    from apiresult.config.logging import ResultLogger
    from apiresult.diagnostic.model import Message

logger: ResultLogger = get_logger(__name__)


@dataclass
class OperationContext:
    """Fatal error, warning, and note latches for one operation.

    Latching a message with empty text is a no-op.
    """

    _fatal_error: Message | None = field(default=None, init=False)
    _warning: Message | None = field(default=None, init=False)
    _note: Message | None = field(default=None, init=False)

    @property
    def fatal_error(self) -> Message | None:
        """The latched fatal error, or None."""
        return self._fatal_error

    @property
    def warning(self) -> Message | None:
        """The latched warning, or None."""
        return self._warning

    @property
    def note(self) -> Message | None:
        """The latched note, or None."""
        return self._note

    def set_fatal_error(self, msg: Message) -> None:
        """Latch a fatal error, replacing any previous one."""
        if not msg.is_set:
            return
        logger.debug("Latching fatal error: %r", msg)
        self._fatal_error = msg

    def set_warning(self, msg: Message, default_code: int = 0) -> None:
        """Latch a warning, stacking it on any previous warning.

        Args:
            msg: The new warning.
            default_code: The caller's generic code; a previous, more specific
                code is kept when `msg` only carries this one.
        """
        if not msg.is_set:
            return
        self._warning = msg.stacked_on(self._warning, default_code)
        logger.debug("Latched warning: %r", self._warning)

    def set_note(self, msg: Message, default_code: int = 0) -> None:
        """Latch a note, stacking it on any previous note.

        Args:
            msg: The new note.
            default_code: The caller's generic code.
        """
        if not msg.is_set:
            return
        self._note = msg.stacked_on(self._note, default_code)
        logger.debug("Latched note: %r", self._note)


_default_operation: OperationContext = OperationContext()


def default_operation() -> OperationContext:
    """Return the process-wide operation context."""
    return _default_operation


def set_fatal_error(msg: Message) -> None:
    """Latch a fatal error on the process-wide context."""
    _default_operation.set_fatal_error(msg)


def set_warning(msg: Message, default_code: int = 0) -> None:
    """Latch a warning on the process-wide context (additive)."""
    _default_operation.set_warning(msg, default_code)


def set_note(msg: Message, default_code: int = 0) -> None:
    """Latch a note on the process-wide context (additive)."""
    _default_operation.set_note(msg, default_code)

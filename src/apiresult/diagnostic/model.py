# topmark:header:start
#
#   project      : APIResult
#   file         : model.py
#   file_relpath : src/apiresult/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic messages carried in the note/warning/error slots of a result.

Sections:
    * MessageLevel: canonical severity tags.
    * Message: immutable (text, code, level) triple.
    * Message.stacked_on: the additive policy used when a warning or note is
      latched on top of an earlier one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from apiresult.core.machine.schemas import MessageKey


class MessageLevel:
    """Canonical values for `Message.level`.

    The level is a free-form tag on the wire; these are the values APIResult
    itself produces.
    """

    FATAL: Final[str] = "FATAL"
    ISSUE: Final[str] = "ISSUE"
    NOTE: Final[str] = "NOTE"
    UNKNOWN: Final[str] = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class Message:
    """A diagnostic unit: text, numeric code, and severity tag.

    An empty `message` means the diagnostic is absent. A `code` of 0 means
    "unset" and is omitted on the wire, as is an empty `level`.
    """

    message: str
    code: int = 0
    level: str = MessageLevel.UNKNOWN

    @property
    def is_set(self) -> bool:
        """Return True if the message carries text."""
        return self.message != ""

    def with_level(self, level: str) -> Message:
        """Return a copy with a different severity tag."""
        return replace(self, level=level)

    def stacked_on(self, previous: Message | None, default_code: int = 0) -> Message:
        """Combine this message with a previously latched one.

        The text becomes ``self.message + previous.message`` (no separator). The
        previous code wins when this code is unset or equals `default_code` and
        the previous code is neither.

        Args:
            previous: The currently latched message, if any.
            default_code: The caller's generic code.

        Returns:
            The combined message; `self` when nothing was latched.
        """
        if previous is None or not previous.is_set:
            return self
        code: int = self.code
        if code in (0, default_code) and previous.code not in (0, default_code):
            code = previous.code
        return replace(self, message=self.message + previous.message, code=code)

    def to_dict(self) -> dict[str, object]:
        """Return the wire representation ``{message, code?, level?}``."""
        out: dict[str, object] = {MessageKey.MESSAGE: self.message}
        if self.code:
            out[MessageKey.CODE] = self.code
        if self.level:
            out[MessageKey.LEVEL] = self.level
        return out

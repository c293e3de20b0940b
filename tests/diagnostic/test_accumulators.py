# topmark:header:start
#
#   project      : APIResult
#   file         : test_accumulators.py
#   file_relpath : tests/diagnostic/test_accumulators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the fatal error / warning / note latches."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from apiresult.diagnostic import accumulators
from apiresult.diagnostic.accumulators import OperationContext, default_operation
from apiresult.diagnostic.model import Message, MessageLevel


def test_fresh_context_is_empty() -> None:
    op = OperationContext()
    assert op.fatal_error is None
    assert op.warning is None
    assert op.note is None


def test_fatal_error_overwrites() -> None:
    op = OperationContext()
    op.set_fatal_error(Message("first", 1, MessageLevel.FATAL))
    op.set_fatal_error(Message("second", 2, MessageLevel.FATAL))
    assert op.fatal_error == Message("second", 2, MessageLevel.FATAL)


def test_warning_concatenates_newest_first() -> None:
    op = OperationContext()
    op.set_warning(Message("A", 10), default_code=10)
    op.set_warning(Message("B", 10), default_code=10)
    assert op.warning is not None
    assert op.warning.message == "BA"
    assert op.warning.code == 10


def test_warning_keeps_specific_previous_code() -> None:
    op = OperationContext()
    op.set_warning(Message("A", 42), default_code=10)
    op.set_warning(Message("B", 10), default_code=10)
    assert op.warning == Message("BA", 42)


def test_note_is_additive_like_warning() -> None:
    op = OperationContext()
    op.set_note(Message("x. ", 0, MessageLevel.NOTE))
    op.set_note(Message("y. ", 3, MessageLevel.NOTE))
    assert op.note == Message("y. x. ", 3, MessageLevel.NOTE)


def test_empty_messages_are_ignored() -> None:
    op = OperationContext()
    op.set_warning(Message("kept", 1))
    op.set_warning(Message("", 99))
    op.set_note(Message(""))
    op.set_fatal_error(Message("", 5, MessageLevel.FATAL))
    assert op.warning == Message("kept", 1)
    assert op.note is None
    assert op.fatal_error is None


def test_slots_are_independent() -> None:
    op = OperationContext()
    op.set_warning(Message("w"))
    op.set_note(Message("n"))
    op.set_fatal_error(Message("e"))
    assert (op.warning, op.note, op.fatal_error) == (Message("w"), Message("n"), Message("e"))


def test_module_level_setters_use_default_operation() -> None:
    accumulators.set_warning(Message("A"))
    accumulators.set_warning(Message("B"))
    accumulators.set_note(Message("n"))
    accumulators.set_fatal_error(Message("boom", 1, MessageLevel.FATAL))
    op = default_operation()
    assert op.warning == Message("BA")
    assert op.note == Message("n")
    assert op.fatal_error == Message("boom", 1, MessageLevel.FATAL)


def test_explicit_contexts_do_not_share_state() -> None:
    first = OperationContext()
    second = OperationContext()
    first.set_warning(Message("only first"))
    assert second.warning is None
    assert default_operation().warning is None


@given(st.lists(st.text(min_size=1), min_size=1, max_size=8))
def test_warning_text_is_reverse_concatenation(texts: list[str]) -> None:
    op = OperationContext()
    for text in texts:
        op.set_warning(Message(text))
    assert op.warning is not None
    assert op.warning.message == "".join(reversed(texts))

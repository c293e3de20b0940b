# topmark:header:start
#
#   project      : APIResult
#   file         : test_builder.py
#   file_relpath : tests/result/test_builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `render_output` / `build_output`.

Covers the success document, every failure branch (missing version, latched
fatal error, encoding failure, pretty-printing failure), and raw mode.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from apiresult.config.settings import FormatOptions, set_json_raw
from apiresult.constants import (
    CODE_ENCODE_FAILED,
    CODE_FORMAT_FAILED,
    CODE_MISSING_API_VERSION,
    ENV_API_VERSION,
)
from apiresult.core.errors import EncodeError, FormatError
from apiresult.core.machine.formatter import pretty_json as real_pretty_json
from apiresult.core.machine.serializers import encode_json as real_encode_json
from apiresult.diagnostic import accumulators
from apiresult.diagnostic.accumulators import OperationContext
from apiresult.diagnostic.model import Message, MessageLevel
from apiresult.result import builder
from apiresult.result.builder import build_output, render_output
from apiresult.result.outcomes import Encoded, Fallback
from tests.conftest import SAMPLE_FIELDS, SAMPLE_ITEMS


def _build(api_version: str | None = "1.0", **kwargs: Any) -> tuple[str, bool]:
    return build_output(api_version, "env", "env", "full", SAMPLE_FIELDS, SAMPLE_ITEMS, **kwargs)


def test_success_document() -> None:
    text, ok = _build()
    assert ok
    assert text.endswith("\n")
    doc = json.loads(text)
    assert doc == {
        "apiVersion": "1.0",
        "context": "env",
        "id": 0,
        "data": {
            "kind": "env",
            "verbosity": "full",
            "fields": ["name", "value"],
            "totalItems": 2,
            "startIndex": 1,
            "currentItemCount": 2,
            "items": list(SAMPLE_ITEMS),
        },
    }


def test_success_returns_encoded_outcome() -> None:
    result = render_output("1.0", "env", "env", "", [], [])
    assert isinstance(result, Encoded)
    assert result.success


def test_missing_version_fails() -> None:
    text, ok = _build(None)
    assert not ok
    doc = json.loads(text)
    assert doc["apiVersion"] == "?.?"
    assert doc["id"] == -1
    assert doc["error"]["code"] == CODE_MISSING_API_VERSION
    assert doc["error"]["level"] == MessageLevel.FATAL
    assert "data" not in doc


def test_missing_version_ignores_latched_diagnostics() -> None:
    accumulators.set_warning(Message("w"))
    accumulators.set_fatal_error(Message("latched", 7, MessageLevel.FATAL))
    doc = json.loads(_build("")[0])
    assert doc["error"]["code"] == CODE_MISSING_API_VERSION
    assert "warning" not in doc


def test_version_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_API_VERSION, "3.2")
    text, ok = _build(None)
    assert ok
    assert json.loads(text)["apiVersion"] == "3.2"


def test_argument_version_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_API_VERSION, "3.2")
    assert json.loads(_build("1.5")[0])["apiVersion"] == "1.5"


def test_latched_fatal_error_suppresses_data() -> None:
    accumulators.set_fatal_error(Message("disk gone", 55, MessageLevel.FATAL))
    accumulators.set_warning(Message("ignored"))
    text, ok = _build()
    assert not ok
    doc = json.loads(text)
    assert doc["id"] == -1
    assert doc["error"] == {"message": "disk gone", "code": 55, "level": "FATAL"}
    assert "data" not in doc
    assert "warning" not in doc


def test_latched_warning_and_note_are_attached() -> None:
    accumulators.set_warning(Message("A", 10, MessageLevel.ISSUE), default_code=10)
    accumulators.set_warning(Message("B", 10, MessageLevel.ISSUE), default_code=10)
    accumulators.set_note(Message("fyi", 0, MessageLevel.NOTE))
    text, ok = _build()
    assert ok
    doc = json.loads(text)
    assert doc["id"] == 0
    assert doc["warning"] == {"message": "BA", "code": 10, "level": "ISSUE"}
    assert doc["note"] == {"message": "fyi", "level": "NOTE"}
    assert doc["data"]["totalItems"] == 2


def test_explicit_operation_context_is_used() -> None:
    accumulators.set_fatal_error(Message("global", 1, MessageLevel.FATAL))
    op = OperationContext()
    op.set_note(Message("local"))
    text, ok = _build(operation=op)
    assert ok
    assert json.loads(text)["note"]["message"] == "local"


def test_encoding_failure_uses_fallback() -> None:
    result = render_output("1.0", "env", "env", "", [], [float("nan")])
    assert isinstance(result, Fallback)
    assert not result.success
    doc = json.loads(result.text)
    assert doc["id"] == -1
    assert doc["apiVersion"] == "1.0"
    assert doc["error"]["code"] == CODE_ENCODE_FAILED
    assert doc["error"]["level"] == MessageLevel.FATAL
    assert doc["error"]["message"].startswith("Failed to convert env (env) items to JSON:")


def test_encoding_failure_reports_carried_warning() -> None:
    accumulators.set_warning(Message('quote " inside', 4, MessageLevel.ISSUE))
    text, ok = build_output("1.0", "env", "env", "", [], [object()])
    assert not ok
    doc = json.loads(text)
    assert doc["warning"] == {"message": 'quote " inside', "code": 4, "level": "ISSUE"}


def test_format_failure_adds_warning_and_stays_successful(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[bytes] = []

    def flaky(data: bytes, *args: Any, **kwargs: Any) -> str:
        calls.append(data)
        if len(calls) == 1:
            raise FormatError("boom")
        return real_pretty_json(data, *args, **kwargs)

    monkeypatch.setattr(builder, "pretty_json", flaky)
    accumulators.set_warning(Message("earlier. ", 0, MessageLevel.ISSUE))
    text, ok = _build()
    assert ok
    assert len(calls) == 2
    doc = json.loads(text)
    assert doc["warning"]["code"] == CODE_FORMAT_FAILED
    assert doc["warning"]["level"] == MessageLevel.ISSUE
    assert doc["warning"]["message"] == "Unable to beautify JSON output: boomearlier. "
    assert doc["data"]["totalItems"] == 2


def test_double_format_failure_returns_raw_text(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*_args: Any, **_kwargs: Any) -> str:
        raise FormatError("still broken")

    monkeypatch.setattr(builder, "pretty_json", broken)
    text, ok = _build()
    assert ok
    assert "\n" not in text
    assert json.loads(text)["warning"]["code"] == CODE_FORMAT_FAILED


def test_reencode_failure_escalates_to_fatal_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    encodes: list[object] = []

    def encode_once(obj: object) -> bytes:
        encodes.append(obj)
        if len(encodes) > 1:
            raise EncodeError("second pass")
        return real_encode_json(obj)

    def broken(*_args: Any, **_kwargs: Any) -> str:
        raise FormatError("no pretty")

    monkeypatch.setattr(builder, "encode_json", encode_once)
    monkeypatch.setattr(builder, "pretty_json", broken)
    result = render_output("1.0", "env", "env", "", [], [])
    assert isinstance(result, Fallback)
    assert not result.success
    assert '"level": "FATAL"' in result.text
    assert str(CODE_FORMAT_FAILED) in result.text


def test_raw_mode_is_verbatim_compact_encoding() -> None:
    set_json_raw(True)
    text, ok = _build()
    assert ok
    assert not text.endswith("\n")
    assert text.startswith('{"apiVersion":"1.0","context":"env","id":0,"data":{')


def test_explicit_options_override_module_settings() -> None:
    set_json_raw(True)
    text, _ = _build(options=FormatOptions(indent_level=4))
    assert '\n    "apiVersion": "1.0"' in text


def test_output_round_trips_through_encoder() -> None:
    text, _ = _build()
    doc = json.loads(text)
    assert real_pretty_json(real_encode_json(doc)) == text


def test_lone_surrogate_item_yields_encodable_fallback() -> None:
    result = render_output("1.0", "ctx", "k", "", [], ["\ud800"])
    assert isinstance(result, Fallback)
    assert not result.success
    result.text.encode("utf-8")
    doc = json.loads(result.text)
    assert doc["error"]["code"] == CODE_ENCODE_FAILED
    assert doc["error"]["message"].startswith("Failed to convert ctx (k) items to JSON:")


def test_latched_fatal_error_keeps_warning_out_of_fallback(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def failing(_obj: object) -> bytes:
        raise EncodeError("cannot encode")

    monkeypatch.setattr(builder, "encode_json", failing)
    accumulators.set_fatal_error(Message("disk gone", 55, MessageLevel.FATAL))
    accumulators.set_warning(Message("stale cache", 3, MessageLevel.ISSUE))
    accumulators.set_note(Message("fyi", 0, MessageLevel.NOTE))
    result = render_output("1.0", "env", "env", "", [], [])
    assert isinstance(result, Fallback)
    doc = json.loads(result.text)
    assert doc["error"] == {"message": "disk gone", "code": 55, "level": "FATAL"}
    assert "warning" not in doc
    assert "note" not in doc

# topmark:header:start
#
#   project      : APIResult
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the APIResult test suite.

Notes:
    APIResult keeps two pieces of process-wide state: the default operation
    context (latched diagnostics) and the current formatter settings. The
    autouse fixture below gives every test a fresh copy of both, and removes
    the ``APIRESULT_*`` environment variables a developer may have exported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from apiresult.config import logging
from apiresult.config import settings as settings_mod
from apiresult.constants import (
    ENV_API_VERSION,
    ENV_JSON_INDENT,
    ENV_JSON_PREFIX,
    ENV_JSON_RAW,
    ENV_LOG_LEVEL,
)
from apiresult.diagnostic import accumulators as accumulators_mod
from apiresult.diagnostic.accumulators import OperationContext

if TYPE_CHECKING:
    from collections.abc import Sequence

_ENV_VARS: tuple[str, ...] = (
    ENV_API_VERSION,
    ENV_JSON_INDENT,
    ENV_JSON_PREFIX,
    ENV_JSON_RAW,
    ENV_LOG_LEVEL,
)


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset process-wide APIResult state and environment for each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(accumulators_mod, "_default_operation", OperationContext())
    monkeypatch.setattr(settings_mod, "_current", settings_mod.FormatOptions())


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during test runs so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


SAMPLE_FIELDS: Sequence[str] = ("name", "value")
SAMPLE_ITEMS: Sequence[object] = (
    {"name": "HOME", "value": "/home/me"},
    {"name": "SHELL", "value": "/bin/zsh"},
)

"""Shared fixtures: isolate settings, clock and logging per test."""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from svckit.foundation.config import clear_settings_cache
from svckit.runtime.observability import configure_logging
from svckit.runtime.observability.logging import reset_logging
from svckit.timex import reset_clock


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: object) -> Iterator[None]:
    """Drop SVCKIT_* variables and any .env file; silence logging."""
    for key in list(os.environ):
        if key.startswith("SVCKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    reset_clock()
    configure_logging(format="none")
    yield
    reset_logging()
    reset_clock()
    clear_settings_cache()

# tests/conftest.py
from __future__ import annotations

import pytest

from tests.helpers.sinks import RecordingLogger


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """
    Keep config discovery hermetic: no $HOOKCONF_CONFIG from the developer's
    shell, and a fresh empty working directory per test.
    """
    monkeypatch.delenv("HOOKCONF_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    yield

"""Pytest configuration shared by the ``splitwise_csv`` test suite.

The CLI loads ``.env`` and reads ``SPLITWISE_CSV_LOG_LEVEL``; tests clear that
variable so a developer's local environment cannot change log output.
"""

from __future__ import annotations

from pathlib import Path

import pytest

TESTDATA_DIR = Path(__file__).resolve().parent / "testdata"


@pytest.fixture(autouse=True)
def _isolate_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPLITWISE_CSV_LOG_LEVEL", raising=False)


@pytest.fixture
def testdata() -> Path:
    """Directory holding the CSV fixtures and ``expected.json``."""

    return TESTDATA_DIR

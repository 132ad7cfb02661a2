from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's .env or SHELLY_* variables out of the tests.
    for key in list(os.environ):
        if key.startswith("SHELLY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

# tests/conftest.py
from pathlib import Path

import pytest


@pytest.fixture
def settings_path(monkeypatch, tmp_path: Path) -> Path:
    """Point HANGUL_FUZZY_SETTINGS at a temp file so tests never read a real settings.yaml."""
    path = tmp_path / "settings.yaml"
    monkeypatch.setenv("HANGUL_FUZZY_SETTINGS", str(path))
    return path

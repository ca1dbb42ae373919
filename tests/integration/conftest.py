"""Fixtures for CLI integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(_clean_env: None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every command at a throwaway config file."""
    path = tmp_path / "cli-config.toml"
    monkeypatch.setenv("AML_MODELS_CONFIG", str(path))
    return path

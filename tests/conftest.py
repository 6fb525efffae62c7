"""Shared pytest fixtures and configuration for the adc test suite.

Guidelines
----------
* No test spawns a real git; the executor is faked or
  ``subprocess.run`` is patched.
* Core tests must be pure, with no side effects.
* Tests must not depend on the real HOME or ``~/.ssh``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from adc.config import Settings


@pytest.fixture
def alice_settings() -> Settings:
    return Settings(home_dir="/home/alice")


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp dir containing an empty ``.ssh/``."""
    home = tmp_path / "home"
    (home / ".ssh").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("ADC_GIT", raising=False)
    return home

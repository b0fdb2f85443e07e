"""Shared fixtures: an isolated environment and a scratch working directory."""

import os
import sys
from pathlib import Path

import pytest


@pytest.fixture
def env() -> dict[str, str]:
    """A private environment mapping; the real os.environ is never touched."""
    return {"PATH": os.environ.get("PATH", os.defpath)}


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def python_script(workdir: Path):
    """Write a small Python program and return the command line prefix to run it."""

    def _write(name: str, source: str) -> str:
        (workdir / name).write_text(source)
        return f"{sys.executable} {name}"

    return _write

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest


def _make_executable(directory: Path, name: str, body: str = 'echo "$@"') -> Path:
    script = directory / name
    script.write_text(f"#!/bin/sh\n{body}\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def make_executable() -> Callable[..., Path]:
    return _make_executable


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A directory with a few shell scripts, first on PATH."""
    directory = tmp_path / "bin"
    directory.mkdir()
    _make_executable(directory, "say")
    _make_executable(directory, "fail", body='echo "oops: $1" >&2\nexit 5')
    _make_executable(directory, "killself", body="kill -TERM $$")
    monkeypatch.setenv("PATH", f"{directory}{os.pathsep}/usr/bin{os.pathsep}/bin")
    return directory


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "work"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture(autouse=True)
def _reset_last_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("Shell.shell.last_status", 0)

"""Shared fixtures for CLI tests.

Common fixtures available from parent conftest.py:
- cli_runner: Click CLI test runner (from tests/conftest.py)
- temp_dir: Temporary directory for test files (from tests/conftest.py)
- clean_env: Clean environment without YAKE_ vars (from tests/conftest.py)
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def project_dir(
    temp_dir: Path,
    clean_env: None,
    monkeypatch: pytest.MonkeyPatch,
    write_yakefile: Callable[..., Path],
    runnable_yakefile_yaml: str,
) -> Path:
    """A working directory holding the runnable Yakefile.

    The home directory is redirected so no user settings file is read.
    """
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)

    project = temp_dir / "project"
    write_yakefile(project, runnable_yakefile_yaml)
    os.chdir(project)
    return project

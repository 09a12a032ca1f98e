# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty directory so no pyproject.toml is picked up."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in ("SEMVER_DIALECT", "SEMVER_SORT_ISEP", "SEMVER_SORT_OSEP", "SEMVER_DIRECTORY"):
        monkeypatch.delenv(name, raising=False)
    return workdir


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml sets [tool.semver]."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "example"
version = "1.0.0"

[tool.semver]
dialect = "strict"
output_separator = " "
prerelease_prefix = "rc"
"""
    )
    return project_dir

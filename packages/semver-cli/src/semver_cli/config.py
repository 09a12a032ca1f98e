# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DIALECTS = ("strict", "loose")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """Defaults for the semver commands, read from ``[tool.semver]``.

    Command-line options and ``SEMVER_*`` environment variables take
    precedence over these values.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        dialect: Grammar used to parse input versions ("strict" or "loose")
        input_separator: Separator between versions read from stdin
        output_separator: Separator between versions written by sort
        prerelease_prefix: Prefix used by ``bump prerel`` when none is given
    """

    project_dir: Optional[Path] = None
    dialect: str = "loose"
    input_separator: str = "\n"
    output_separator: str = "\n"
    prerelease_prefix: Optional[str] = None

    @property
    def loose(self) -> bool:
        return self.dialect == "loose"

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid or holds wrongly typed keys
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        tool_semver = pyproject.get("tool", {}).get("semver", {})
        if not isinstance(tool_semver, dict):
            raise ConfigError("[tool.semver] must be a table")

        def _string(key: str, default: Optional[str]) -> Optional[str]:
            value = tool_semver.get(key, default)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"tool.semver.{key} must be a string, got {type(value).__name__}")
            return value

        dialect = _string("dialect", "loose")
        if dialect not in DIALECTS:
            raise ConfigError(f"tool.semver.dialect must be one of {', '.join(DIALECTS)}, got {dialect!r}")

        return cls(
            project_dir=project_dir,
            dialect=dialect,
            input_separator=_string("input_separator", "\n") or "\n",
            output_separator=_string("output_separator", "\n"),
            prerelease_prefix=_string("prerelease_prefix", None),
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory holding a pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration for the project around ``project_dir``.

    Returns the built-in defaults when no pyproject.toml is found.

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    root = find_project_root(project_dir)
    if root is None:
        return CLIConfig()
    return CLIConfig.from_pyproject(root)

# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from semver_core import SemverError, Version, parse_version

from .config import DIALECTS, CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def is_loose(self, dialect: Optional[str]) -> bool:
        """Resolve the grammar for this invocation (option > config)."""
        if dialect is not None:
            return dialect == "loose"
        return self.load_config().loose

    def parse(self, text: str, dialect: Optional[str]) -> Version:
        """Parse ``text`` with the resolved grammar, reporting it when verbose."""
        loose = self.is_loose(dialect)
        version = parse_version(text, loose=loose)
        if self.verbose:
            echo_info(
                f"Parsed {text!r} ({'loose' if loose else 'strict'}): "
                f"major={version.major} minor={version.minor} patch={version.patch} "
                f"prerelease={version.prerelease_text!r} metadata={version.metadata_text!r}"
            )
        return version


pass_context = click.make_pass_decorator(Context, ensure=True)

dialect_option = click.option(
    "--dialect",
    type=click.Choice(DIALECTS),
    default=None,
    help="Grammar for input versions (default: loose, or tool.semver.dialect).",
)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message, err=True)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def fail(error: Exception) -> NoReturn:
    """Report ``error`` and exit with status 1."""
    echo_error(str(error))
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="semver-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.semver] configuration starting from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool.

    Compare, sort, validate and bump SemVer 2.0.0 versions. Options can also
    be set through SEMVER_<COMMAND>_<OPTION> environment variables.

    \b
    Examples:
        semver compare 1.2.3 1.10.0
        semver sort 1.2.3 1.0 2 0.4.2
        semver validate v1.2
        semver bump minor 1.2.3-beta
        semver bump prerel --prefix rc 1.2.3-beta4
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import compare, sort, validate, bump

cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(validate.validate)
cli.add_command(bump.bump)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli(auto_envvar_prefix="SEMVER")
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except SemverError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()

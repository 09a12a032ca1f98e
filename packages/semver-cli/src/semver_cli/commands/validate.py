# SPDX-License-Identifier: MIT
"""Validate a version string."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import SemverError

from ..config import ConfigError
from ..main import Context, dialect_option, echo_success, fail, pass_context


@click.command()
@click.argument("version", required=False)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print 'valid' or 'invalid' and always exit 0.",
)
@dialect_option
@pass_context
def validate(ctx: Context, version: Optional[str], to_stdout: bool, dialect: Optional[str]) -> None:
    """Check that VERSION is a valid version.

    With no VERSION, or '-', the version is read from stdin. Exits 1 for an
    invalid version unless --stdout is given.

    \b
    Examples:
        semver validate 1.2.3
        semver validate --dialect strict v1.2   # exits 1
        echo 1.2.3 | semver validate --stdout   # valid
    """
    if version is None or version == "-":
        with click.open_file("-") as stdin:
            version = stdin.read().strip()

    try:
        ctx.parse(version, dialect)
    except ConfigError as e:
        fail(e)
    except SemverError as e:
        if to_stdout:
            click.echo("invalid")
            return
        fail(e)

    if to_stdout:
        click.echo("valid")
    elif ctx.verbose:
        echo_success(f"{version} is valid")

# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import SemverError, compare as compare_precedence

from ..config import ConfigError
from ..main import Context, dialect_option, fail, pass_context


@click.command()
@click.argument("version1")
@click.argument("version2")
@dialect_option
@pass_context
def compare(ctx: Context, version1: str, version2: str, dialect: Optional[str]) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower than, equal to or higher than VERSION2.

    Metadata (+...) does not take part in the comparison.

    \b
    Examples:
        semver compare 1.2.3 1.10.0      # -1
        semver compare v2 2.0.0+build.5  # 0
    """
    try:
        v1 = ctx.parse(version1, dialect)
        v2 = ctx.parse(version2, dialect)
    except (SemverError, ConfigError) as e:
        fail(e)

    click.echo(compare_precedence(v1, v2))

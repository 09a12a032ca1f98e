# SPDX-License-Identifier: MIT
"""Sort a list of versions."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import latest, oldest, parse_many, sort_versions

from ..config import ConfigError
from ..main import Context, dialect_option, echo_error, echo_info, echo_warning, fail, pass_context

FILTERS = ("latest", "oldest")


def _read_input(versions: tuple[str, ...], separator: str) -> list[str]:
    """Take versions from the arguments, or from stdin when none (or '-') are given."""
    if versions and versions[0] != "-":
        return list(versions)

    with click.open_file("-") as stdin:
        data = stdin.read()
    return [item.strip() for item in data.split(separator) if item.strip()]


@click.command()
@click.argument("versions", nargs=-1)
@click.option("-s", "--isep", default=None, help="Separator between versions read from stdin (default: newline).")
@click.option("--osep", default=None, help="Separator between printed versions (default: newline).")
@click.option(
    "--filter",
    "filter_",
    type=click.Choice(FILTERS),
    default=None,
    help="Keep only the latest or the oldest version.",
)
@click.option("-r", "--reverse", is_flag=True, help="Sort from highest to lowest.")
@dialect_option
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    isep: Optional[str],
    osep: Optional[str],
    filter_: Optional[str],
    reverse: bool,
    dialect: Optional[str],
) -> None:
    """Sort VERSIONS by precedence and print them in canonical form.

    With no VERSIONS, or '-', versions are read from stdin. The filter is
    applied first, then the result is sorted.

    \b
    Examples:
        semver sort 1.2.3 1.0 1.3 2 0.4.2   # 0.4.2 1.0.0 1.2.3 1.3.0 2.0.0
        git tag | semver sort --filter latest
        semver sort -r --osep , 1.0 2.0
    """
    try:
        config = ctx.load_config()
        loose = ctx.is_loose(dialect)
    except ConfigError as e:
        fail(e)

    isep = isep if isep is not None else config.input_separator
    osep = osep if osep is not None else config.output_separator

    raw = _read_input(versions, isep)
    if not raw:
        echo_warning("No versions to sort")
        return

    outcomes = parse_many(raw, loose=loose)
    failures = [outcome for outcome in outcomes if not outcome.ok]
    if failures:
        for outcome in failures:
            echo_error(str(outcome.error))
        raise SystemExit(1)

    parsed = [outcome.version for outcome in outcomes]
    if ctx.verbose:
        echo_info(f"Parsed {len(parsed)} versions ({'loose' if loose else 'strict'})")

    if filter_ == "latest":
        parsed = [v for v in [latest(parsed)] if v is not None]
    elif filter_ == "oldest":
        parsed = [v for v in [oldest(parsed)] if v is not None]

    ordered = sort_versions(parsed, reverse=reverse)
    click.echo(osep.join(str(v) for v in ordered))

# SPDX-License-Identifier: MIT
"""Bump a version.

Each subcommand parses VERSION, applies one change from semver_core and
prints the result. The parsed version and the requested prefix are passed
to the core explicitly; subcommands share no state.
"""

from __future__ import annotations

from typing import Callable, Optional

import click

from semver_core import SemverError, Version, bump_prerelease, extract_counter

from ..config import ConfigError
from ..main import Context, dialect_option, echo_info, fail, pass_context

# Legacy spelling of "continue the current counter"
CONTINUE = "+"

keep_prefix_option = click.option(
    "--keep-prefix",
    is_flag=True,
    help="Keep a leading 'v' from the input in the printed version.",
)


def _emit(version: Version, keep_prefix: bool) -> None:
    click.echo(version.original_text if keep_prefix else str(version))


def _run(
    ctx: Context,
    text: str,
    dialect: Optional[str],
    keep_prefix: bool,
    change: Callable[[Version], Version],
) -> None:
    try:
        version = ctx.parse(text, dialect)
        bumped = change(version)
    except (SemverError, ConfigError) as e:
        fail(e)
    _emit(bumped, keep_prefix)


@click.group()
def bump() -> None:
    """Bump the major, minor, patch, pre-release or metadata part of a version.

    \b
    Examples:
        semver bump major 1.2.3            # 2.0.0
        semver bump patch 1.2.3-beta+meta  # 1.2.4
        semver bump prerel 1.2.3-rc3       # 1.2.3-rc4
        semver bump prerel -p beta 1.2.3-rc3   # 1.2.3-beta0
        semver bump release 1.2.3-rc3      # 1.2.3
    """


def _segment_command(name: str, change: Callable[[Version], Version], summary: str) -> click.Command:
    @click.command(name=name, help=summary)
    @click.argument("version")
    @dialect_option
    @keep_prefix_option
    @pass_context
    def command(ctx: Context, version: str, dialect: Optional[str], keep_prefix: bool) -> None:
        _run(ctx, version, dialect, keep_prefix, change)

    return command


bump.add_command(
    _segment_command("major", Version.increment_major, "Increment the major version; reset minor and patch.")
)
bump.add_command(_segment_command("minor", Version.increment_minor, "Increment the minor version; reset patch."))
bump.add_command(_segment_command("patch", Version.increment_patch, "Increment the patch version."))
bump.add_command(
    _segment_command(
        "release",
        Version.clear_prerelease_and_metadata,
        "Drop the pre-release and metadata, keeping major.minor.patch.",
    )
)


@bump.command()
@click.argument("version")
@click.option(
    "-p",
    "--prefix",
    default=None,
    help="New pre-release prefix; the counter restarts at 0 when it changes. "
    "Omit it (or pass '+') to continue the current counter.",
)
@dialect_option
@keep_prefix_option
@pass_context
def prerel(
    ctx: Context,
    version: str,
    prefix: Optional[str],
    dialect: Optional[str],
    keep_prefix: bool,
) -> None:
    """Advance the pre-release counter of VERSION.

    \b
    rc3  -> rc4    (no prefix, or --prefix rc)
    rc   -> rc0
    rc3  -> beta0  (--prefix beta)
    rc3  -> 0      (--prefix "")
    """
    if prefix is None:
        try:
            prefix = ctx.load_config().prerelease_prefix
        except ConfigError as e:
            fail(e)
    new_prefix = None if prefix == CONTINUE else prefix

    def change(parsed: Version) -> Version:
        if ctx.verbose:
            current, counter = extract_counter(parsed.prerelease_text)
            action = "continue" if new_prefix in (None, current) else f"switch to {new_prefix!r}"
            echo_info(f"Pre-release prefix {current!r}, counter {counter}: {action}")
        return bump_prerelease(parsed, new_prefix)

    _run(ctx, version, dialect, keep_prefix, change)


@bump.command()
@click.argument("version")
@click.option("-m", "--metadata", required=True, help="Metadata to set, e.g. build.42 (empty to remove).")
@dialect_option
@keep_prefix_option
@pass_context
def metadata(
    ctx: Context,
    version: str,
    metadata: str,
    dialect: Optional[str],
    keep_prefix: bool,
) -> None:
    """Replace the metadata (+...) of VERSION."""
    _run(ctx, version, dialect, keep_prefix, lambda parsed: parsed.set_metadata(metadata))

# SPDX-License-Identifier: MIT
"""Pre-release counter bumping.

A pre-release such as ``rc3`` or ``beta.7`` is read as a textual prefix
(``rc``, ``beta.``) followed by a numeric counter (``3``, ``7``). Bumping
either advances the counter or switches to a new prefix and restarts the
counter at zero.

The ``new_prefix`` argument has three states:

- ``None``: continue the current counter
- ``""``: use an empty prefix (the pre-release becomes a bare number)
- any other string: use that prefix

Examples:
    >>> next_prerelease("rc")
    'rc0'
    >>> next_prerelease("rc3")
    'rc4'
    >>> next_prerelease("rc3", "beta")
    'beta0'
    >>> next_prerelease("rc3", "rc")
    'rc4'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from .semver import Version

_DIGITS = "0123456789"


class BumpResult(NamedTuple):
    """Prefix and trailing counter extracted from a pre-release string."""

    prefix: str
    counter: Optional[int]


def extract_counter(prerelease: str) -> BumpResult:
    """Split a pre-release string into prefix and trailing counter.

    The counter is the maximal run of digits at the end of the string;
    everything before it, dots included, is the prefix. Without trailing
    digits the whole string is the prefix and the counter is None.
    """
    # Pass 1: find where the trailing digit run starts
    split = len(prerelease)
    while split > 0 and prerelease[split - 1] in _DIGITS:
        split -= 1

    # Pass 2: cut there
    if split == len(prerelease):
        return BumpResult(prefix=prerelease, counter=None)
    return BumpResult(prefix=prerelease[:split], counter=int(prerelease[split:]))


def next_prerelease(current: str, new_prefix: Optional[str] = None) -> str:
    """Compute the pre-release that follows ``current``.

    A ``new_prefix`` equal to the current prefix behaves like continuing.
    The result is not validated here.
    """
    prefix, counter = extract_counter(current)

    if new_prefix is not None and new_prefix != prefix:
        return f"{new_prefix}0"
    if counter is None:
        return f"{prefix}0"
    return f"{prefix}{counter + 1}"


def bump_prerelease(version: Version, new_prefix: Optional[str] = None) -> Version:
    """Return ``version`` with its pre-release advanced.

    Metadata is kept.

    Raises:
        InvalidPrereleaseError: If the computed pre-release is not valid,
            e.g. because ``new_prefix`` holds characters outside [0-9A-Za-z.-]
    """
    return version.set_prerelease(next_prerelease(version.prerelease_text, new_prefix))

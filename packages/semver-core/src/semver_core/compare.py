# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0.

Pre-release versions sort before the release they precede. Build metadata
never affects precedence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Union

from .grammar import is_numeric

if TYPE_CHECKING:
    from .semver import Version


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_identifier(a: str, b: str) -> int:
    a_numeric, b_numeric = is_numeric(a), is_numeric(b)
    if a_numeric and b_numeric:
        return _sign(int(a) - int(b))
    if a_numeric != b_numeric:
        # numeric identifiers rank below alphanumeric ones
        return -1 if a_numeric else 1
    # plain code point order, no locale
    return (a > b) - (a < b)


def compare_prerelease(ids1: Sequence[str], ids2: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if ids1 < ids2
        0 if ids1 == ids2
        1 if ids1 > ids2

    An empty sequence means "no pre-release", which outranks any
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not ids1 or not ids2:
        # a release (no identifiers) outranks any pre-release
        return _sign(len(ids2) - len(ids1))

    for a, b in zip(ids1, ids2):
        result = _compare_identifier(a, b)
        if result:
            return result

    # a longer list that the shorter one prefixes wins
    return _sign(len(ids1) - len(ids2))


def compare(v1: Version, v2: Version) -> int:
    """Compare two parsed versions by precedence.

    Returns:
        -1 if v1 < v2
        0 if v1 == v2
        1 if v1 > v2
    """
    core1 = (v1.major, v1.minor, v1.patch)
    core2 = (v2.major, v2.minor, v2.patch)
    if core1 != core2:
        return -1 if core1 < core2 else 1
    return compare_prerelease(v1.prerelease, v2.prerelease)


def _coerce(version: Union[str, Version]) -> Version:
    if isinstance(version, str):
        from .semver import parse_version

        return parse_version(version, loose=True)
    return version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        MalformedVersionError: If either version string is invalid

    Note:
        Strings are parsed with the loose grammar, so "v1.2" is accepted.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    return compare(_coerce(version1), _coerce(version2))


def less_than(v1: Version, v2: Version) -> bool:
    return compare(v1, v2) < 0


def less_or_equal(v1: Version, v2: Version) -> bool:
    return compare(v1, v2) <= 0


def greater_than(v1: Version, v2: Version) -> bool:
    return compare(v1, v2) > 0


def greater_or_equal(v1: Version, v2: Version) -> bool:
    return compare(v1, v2) >= 0


def equal(v1: Optional[Version], v2: Optional[Version]) -> bool:
    """Return True if both versions have the same precedence.

    Two missing versions are equal; a missing version never equals a
    present one.
    """
    if v1 is None or v2 is None:
        return v1 is None and v2 is None
    return compare(v1, v2) == 0


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with :func:`compare`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    if not v.prerelease:
        # (1,) sorts after every (0, ...)
        return (v.major, v.minor, v.patch, (1,))

    identifiers = tuple((0, int(p), "") if is_numeric(p) else (1, 0, p) for p in v.prerelease)
    return (v.major, v.minor, v.patch, (0, identifiers))

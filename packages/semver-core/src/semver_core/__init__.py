# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and bumping.

This package provides utilities for parsing, comparing and changing
semantic versions following SemVer 2.0.0, plus a loose
dialect that accepts a leading 'v' and missing minor/patch segments.

Example:
    >>> from semver_core import parse_version, parse_loose, compare_versions, bump_prerelease
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_text
    'alpha.1'
    >>>
    >>> str(parse_loose("v1.2"))
    '1.2.0'
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
    >>>
    >>> str(bump_prerelease(parse_version("1.0.0-rc3")))
    '1.0.0-rc4'
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    Reason,
    SemverError,
    MalformedVersionError,
    SegmentStartsWithZeroError,
    InvalidPrereleaseError,
    InvalidMetadataError,
)
from .grammar import (
    SEMVER_PATTERN,
    LOOSE_PATTERN,
    split_prerelease,
    split_metadata,
)
from .semver import (
    Version,
    parse_version,
    parse_strict,
    parse_loose,
    is_valid_semver,
)
from .compare import (
    compare,
    compare_versions,
    compare_prerelease,
    less_than,
    less_or_equal,
    greater_than,
    greater_or_equal,
    equal,
    version_key,
)
from .bump import (
    BumpResult,
    extract_counter,
    next_prerelease,
    bump_prerelease,
)
from .collection import (
    ParseOutcome,
    parse_many,
    sort_versions,
    latest,
    oldest,
)

__all__ = [
    # Errors
    "ErrorKind",
    "Reason",
    "SemverError",
    "MalformedVersionError",
    "SegmentStartsWithZeroError",
    "InvalidPrereleaseError",
    "InvalidMetadataError",
    # Grammar
    "SEMVER_PATTERN",
    "LOOSE_PATTERN",
    "split_prerelease",
    "split_metadata",
    # Version parsing
    "Version",
    "parse_version",
    "parse_strict",
    "parse_loose",
    "is_valid_semver",
    # Version comparison
    "compare",
    "compare_versions",
    "compare_prerelease",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    "equal",
    "version_key",
    # Pre-release bumping
    "BumpResult",
    "extract_counter",
    "next_prerelease",
    "bump_prerelease",
    # Collections
    "ParseOutcome",
    "parse_many",
    "sort_versions",
    "latest",
    "oldest",
]

# SPDX-License-Identifier: MIT
"""Semantic version value and parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Metadata: +build, +build.123, +20240101

The loose dialect additionally accepts a leading 'v' and missing minor or
patch segments (``v1.2``, ``1``, ``1.2-beta.5``).
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .compare import compare
from .errors import InvalidMetadataError, InvalidPrereleaseError, MalformedVersionError, Reason
from .grammar import (
    MAX_SEGMENT,
    split_metadata,
    split_prerelease,
    tokenize,
)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Equality, hashing and ordering follow version precedence: metadata and
    the original text never take part.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1"))
        metadata: Build metadata identifiers (e.g., ("build", "123"))
        original_text: The exact string this version was parsed from
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    metadata: tuple[str, ...] = ()
    original_text: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_SEGMENT:
                raise MalformedVersionError(
                    str(value), Reason.OUT_OF_RANGE, f"{name} must be an integer in 0..2**64-1, got {value!r}"
                )
        for name, split, error in (
            ("prerelease", split_prerelease, InvalidPrereleaseError),
            ("metadata", split_metadata, InvalidMetadataError),
        ):
            value = getattr(self, name)
            # Accept "alpha.1" as well as ("alpha", "1")
            if isinstance(value, str):
                identifiers = split(value)
            else:
                identifiers = tuple(value)
                if not all(isinstance(identifier, str) for identifier in identifiers):
                    raise error(repr(value), Reason.INVALID_CHARACTER)
                text = ".".join(identifiers)
                if len(split(text)) != len(identifiers):
                    reason = Reason.EMPTY_IDENTIFIER if "" in identifiers else Reason.INVALID_CHARACTER
                    raise error(text, reason)
            object.__setattr__(self, name, identifiers)
        if not self.original_text:
            object.__setattr__(self, "original_text", self._canonical())

    def _canonical(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease_text}"
        if self.metadata:
            version += f"+{self.metadata_text}"
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self._canonical()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    @property
    def prerelease_text(self) -> str:
        """Return the pre-release identifiers joined by dots."""
        return ".".join(self.prerelease)

    @property
    def metadata_text(self) -> str:
        """Return the metadata identifiers joined by dots."""
        return ".".join(self.metadata)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def had_v_prefix(self) -> bool:
        """Return True if the original text started with 'v' or 'V'."""
        return self.original_text[:1] in ("v", "V")

    def _derive(self, **changes) -> Version:
        """Return a copy with ``changes`` applied and a canonical original text."""
        changes["original_text"] = ""
        derived = dataclasses.replace(self, **changes)
        if self.had_v_prefix:
            object.__setattr__(derived, "original_text", self.original_text[0] + str(derived))
        return derived

    def increment_major(self) -> Version:
        """Return the next major version; lower segments and suffixes are cleared."""
        return self._derive(major=self.major + 1, minor=0, patch=0, prerelease=(), metadata=())

    def increment_minor(self) -> Version:
        """Return the next minor version; patch and suffixes are cleared."""
        return self._derive(minor=self.minor + 1, patch=0, prerelease=(), metadata=())

    def increment_patch(self) -> Version:
        """Return the next patch version; suffixes are cleared."""
        return self._derive(patch=self.patch + 1, prerelease=(), metadata=())

    def set_prerelease(self, text: str) -> Version:
        """Return a copy with the pre-release replaced by ``text``.

        An empty string removes the pre-release. Metadata is kept.

        Raises:
            InvalidPrereleaseError: If ``text`` is not a valid pre-release;
                the error's ``version`` is this (unchanged) version
        """
        try:
            identifiers = split_prerelease(text)
        except InvalidPrereleaseError as e:
            raise InvalidPrereleaseError(e.text, e.reason, version=self) from None
        return self._derive(prerelease=identifiers)

    def set_metadata(self, text: str) -> Version:
        """Return a copy with the metadata replaced by ``text``.

        Raises:
            InvalidMetadataError: If ``text`` is not valid metadata; the
                error's ``version`` is this (unchanged) version
        """
        try:
            identifiers = split_metadata(text)
        except InvalidMetadataError as e:
            raise InvalidMetadataError(e.text, e.reason, version=self) from None
        return self._derive(metadata=identifiers)

    def clear_prerelease_and_metadata(self) -> Version:
        """Return the release form of this version."""
        return self._derive(prerelease=(), metadata=())


def parse_version(version_string: str, *, loose: bool = False) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+metadata])
        loose: Also accept a leading 'v' and missing minor/patch segments

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the string does not match the grammar

    Examples:
        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), metadata=())

        >>> str(parse_version("v1.2", loose=True))
        '1.2.0'
    """
    tokens = tokenize(version_string, loose=loose)
    return Version(
        major=tokens.major,
        minor=tokens.minor,
        patch=tokens.patch,
        prerelease=tokens.prerelease,
        metadata=tokens.metadata,
        original_text=tokens.original,
    )


def parse_strict(version_string: str) -> Version:
    """Parse ``version_string`` with the strict SemVer 2.0.0 grammar."""
    return parse_version(version_string)


def parse_loose(version_string: str) -> Version:
    """Parse ``version_string`` with the loose grammar."""
    return parse_version(version_string, loose=True)


def is_valid_semver(version_string: str, *, loose: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0", loose=True)
        True
    """
    if not isinstance(version_string, str):
        return False
    try:
        tokenize(version_string, loose=loose)
    except MalformedVersionError:
        return False
    return True

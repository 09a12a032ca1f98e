# SPDX-License-Identifier: MIT
"""Grammar for strict and loose version strings.

Strict:  MAJOR.MINOR.PATCH[-PRERELEASE][+METADATA]
Loose:   [v|V]MAJOR[.MINOR[.PATCH]][-PRERELEASE][+METADATA]

Accepted input goes through the compiled patterns below. Rejected input is
re-scanned by :func:`diagnose` so the error names the rule that failed.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from .errors import (
    InvalidMetadataError,
    InvalidPrereleaseError,
    MalformedVersionError,
    Reason,
    SegmentStartsWithZeroError,
    SemverError,
)

# Largest value a numeric segment may hold (unsigned 64 bit)
MAX_SEGMENT = 2**64 - 1

_NUMBER = r"0|[1-9][0-9]*"
_PRERELEASE_ID = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_SUFFIX = (
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)

# SemVer 2.0.0 grammar, all three segments required
SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMBER})\.(?P<minor>{_NUMBER})\.(?P<patch>{_NUMBER})" + _SUFFIX
)

# Optional 'v' and optional minor/patch segments
LOOSE_PATTERN = re.compile(
    rf"[vV]?(?P<major>{_NUMBER})(?:\.(?P<minor>{_NUMBER}))?(?:\.(?P<patch>{_NUMBER}))?"
    + _SUFFIX
)

_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")
_NUMERIC = re.compile(r"[0-9]+")
_DIGITS = frozenset("0123456789")


class Tokens(NamedTuple):
    """Components of a version string accepted by the grammar."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...]
    metadata: tuple[str, ...]
    original: str


def is_numeric(identifier: str) -> bool:
    """Return True if the identifier is made of ASCII digits only."""
    return _NUMERIC.fullmatch(identifier) is not None


def identifier_reason(text: str, *, prerelease: bool) -> Optional[Reason]:
    """Return why a dot-separated identifier list is invalid, or None.

    Pre-release identifiers additionally reject numeric values with a
    leading zero; metadata identifiers allow them.
    """
    if not text:
        return Reason.EMPTY_IDENTIFIER
    for identifier in text.split("."):
        if not identifier:
            return Reason.EMPTY_IDENTIFIER
        if _IDENTIFIER.fullmatch(identifier) is None:
            return Reason.INVALID_CHARACTER
        if prerelease and len(identifier) > 1 and identifier[0] == "0" and is_numeric(identifier):
            return Reason.LEADING_ZERO
    return None


def split_prerelease(text: str) -> tuple[str, ...]:
    """Validate a pre-release string and split it into identifiers.

    An empty string means "no pre-release" and yields an empty tuple.

    Raises:
        InvalidPrereleaseError: If any identifier breaks the grammar
    """
    if text == "":
        return ()
    reason = identifier_reason(text, prerelease=True)
    if reason is not None:
        raise InvalidPrereleaseError(text, reason)
    return tuple(text.split("."))


def split_metadata(text: str) -> tuple[str, ...]:
    """Validate a metadata string and split it into identifiers.

    Raises:
        InvalidMetadataError: If any identifier breaks the grammar
    """
    if text == "":
        return ()
    reason = identifier_reason(text, prerelease=False)
    if reason is not None:
        raise InvalidMetadataError(text, reason)
    return tuple(text.split("."))


def _scan_segments(body: str) -> tuple[list[str], int]:
    """Collect the leading dot-separated digit runs of ``body``.

    Returns the runs and the index just past the last one. A dot is only
    consumed when a digit follows it.
    """
    segments: list[str] = []
    pos = 0
    while True:
        start = pos
        while pos < len(body) and body[pos] in _DIGITS:
            pos += 1
        if pos == start:
            break
        segments.append(body[start:pos])
        if pos + 1 < len(body) and body[pos] == "." and body[pos + 1] in _DIGITS:
            pos += 1
            continue
        break
    return segments, pos


def diagnose(text: str, *, loose: bool) -> Optional[SemverError]:
    """Scan ``text`` and return the error describing why it is rejected.

    Returns None when the text satisfies the selected dialect.
    """
    if not text:
        return MalformedVersionError(text, Reason.EMPTY)

    body = text
    if body[0] in "vV":
        if not loose:
            return MalformedVersionError(text, Reason.V_PREFIX)
        body = body[1:]

    segments, pos = _scan_segments(body)
    if not segments:
        reason = Reason.INVALID_CHARACTER if body else Reason.SEGMENT_COUNT
        return MalformedVersionError(text, reason)
    if len(segments) > 3 or (not loose and len(segments) < 3):
        return MalformedVersionError(
            text, Reason.SEGMENT_COUNT, f"expected {'1 to 3' if loose else '3'} numeric segments, "
            f"found {len(segments)}: {text!r}"
        )
    for segment in segments:
        if len(segment) > 1 and segment[0] == "0":
            return SegmentStartsWithZeroError(text)

    rest = body[pos:]
    if rest and rest[0] not in "-+":
        return MalformedVersionError(text, Reason.TRAILING_GARBAGE)

    metadata_text: Optional[str] = None
    if rest.startswith("-"):
        prerelease_text, plus, tail = rest[1:].partition("+")
        reason = identifier_reason(prerelease_text, prerelease=True)
        if reason is Reason.LEADING_ZERO:
            return SegmentStartsWithZeroError(text)
        if reason is not None:
            return MalformedVersionError(text, reason)
        if plus:
            metadata_text = tail
    elif rest.startswith("+"):
        metadata_text = rest[1:]

    if metadata_text is not None:
        if "+" in metadata_text:
            return MalformedVersionError(text, Reason.MULTIPLE_METADATA)
        reason = identifier_reason(metadata_text, prerelease=False)
        if reason is not None:
            return MalformedVersionError(text, reason)

    if any(int(segment) > MAX_SEGMENT for segment in segments):
        return MalformedVersionError(text, Reason.OUT_OF_RANGE)
    return None


def tokenize(text: str, *, loose: bool) -> Tokens:
    """Split a version string into its components.

    Args:
        text: The raw version string; it is not stripped
        loose: Accept the loose dialect instead of strict SemVer

    Returns:
        The parsed components, with missing loose segments set to 0

    Raises:
        MalformedVersionError: If the text breaks the grammar
    """
    if not isinstance(text, str):
        raise MalformedVersionError(
            str(text), Reason.INVALID_CHARACTER, f"Version must be a string, got {type(text).__name__}"
        )

    pattern = LOOSE_PATTERN if loose else SEMVER_PATTERN
    match = pattern.fullmatch(text)
    if match is None:
        error = diagnose(text, loose=loose)
        raise error if error is not None else MalformedVersionError(text, Reason.INVALID_CHARACTER)

    numbers = [int(match.group(name) or 0) for name in ("major", "minor", "patch")]
    if any(number > MAX_SEGMENT for number in numbers):
        raise MalformedVersionError(text, Reason.OUT_OF_RANGE)

    prerelease = match.group("prerelease")
    metadata = match.group("metadata")
    return Tokens(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        metadata=tuple(metadata.split(".")) if metadata else (),
        original=text,
    )

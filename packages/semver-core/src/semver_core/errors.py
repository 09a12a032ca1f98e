# SPDX-License-Identifier: MIT
"""Error kinds raised by version parsing and mutation.

Every failure is an ordinary exception derived from :class:`SemverError`.
``kind`` tells callers which family a failure belongs to and ``reason``
names the grammar rule that was violated.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .semver import Version


class ErrorKind(str, Enum):
    """Family of a version error."""

    MALFORMED_VERSION = "malformed_version"
    INVALID_PRERELEASE = "invalid_prerelease"
    INVALID_METADATA = "invalid_metadata"
    SEGMENT_STARTS_WITH_ZERO = "segment_starts_with_zero"


class Reason(str, Enum):
    """Grammar rule that rejected the input."""

    EMPTY = "empty"
    V_PREFIX = "v_prefix"
    SEGMENT_COUNT = "segment_count"
    LEADING_ZERO = "leading_zero"
    INVALID_CHARACTER = "invalid_character"
    EMPTY_IDENTIFIER = "empty_identifier"
    TRAILING_GARBAGE = "trailing_garbage"
    OUT_OF_RANGE = "out_of_range"
    MULTIPLE_METADATA = "multiple_metadata"


_REASON_TEXT = {
    Reason.EMPTY: "version string cannot be empty",
    Reason.V_PREFIX: "a leading 'v' is not allowed in strict versions",
    Reason.SEGMENT_COUNT: "wrong number of numeric segments",
    Reason.LEADING_ZERO: "numeric segment starts with zero",
    Reason.INVALID_CHARACTER: "invalid character",
    Reason.EMPTY_IDENTIFIER: "empty identifier",
    Reason.TRAILING_GARBAGE: "unexpected trailing characters",
    Reason.OUT_OF_RANGE: "numeric segment is too large",
    Reason.MULTIPLE_METADATA: "more than one metadata block",
}


class SemverError(Exception):
    """Base class for all version errors."""

    kind: ErrorKind = ErrorKind.MALFORMED_VERSION

    def __init__(self, text: str, reason: Reason, message: str = ""):
        self.text = text
        self.reason = reason
        self.message = message or f"{_REASON_TEXT[reason]}: {text!r}"
        super().__init__(self.message)


class MalformedVersionError(SemverError):
    """Raised when a string does not match the selected version grammar."""

    kind = ErrorKind.MALFORMED_VERSION


class SegmentStartsWithZeroError(MalformedVersionError):
    """Raised when a numeric segment or identifier has a leading zero."""

    kind = ErrorKind.SEGMENT_STARTS_WITH_ZERO

    def __init__(self, text: str, message: str = ""):
        super().__init__(text, Reason.LEADING_ZERO, message)


class InvalidPrereleaseError(SemverError):
    """Raised when a pre-release string violates the identifier grammar.

    ``version`` holds the value the change was attempted on; it is returned
    to callers untouched.
    """

    kind = ErrorKind.INVALID_PRERELEASE

    def __init__(
        self,
        text: str,
        reason: Reason,
        version: Optional["Version"] = None,
        message: str = "",
    ):
        self.version = version
        super().__init__(text, reason, message or f"invalid pre-release ({reason.value}): {text!r}")


class InvalidMetadataError(SemverError):
    """Raised when a metadata string violates the identifier grammar."""

    kind = ErrorKind.INVALID_METADATA

    def __init__(
        self,
        text: str,
        reason: Reason,
        version: Optional["Version"] = None,
        message: str = "",
    ):
        self.version = version
        super().__init__(text, reason, message or f"invalid metadata ({reason.value}): {text!r}")

# SPDX-License-Identifier: MIT
"""Unit tests for semantic version parsing and mutation."""

import pytest

from semver_core import (
    Version,
    parse_version,
    parse_strict,
    parse_loose,
    is_valid_semver,
    ErrorKind,
    Reason,
    MalformedVersionError,
    SegmentStartsWithZeroError,
    InvalidPrereleaseError,
    InvalidMetadataError,
)


class TestParseVersion:
    """Tests for parse_version function."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse_version("1.2.3")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prerelease == ()
        assert v.metadata == ()

    def test_version_with_zeros(self):
        """Test parsing version with zero components."""
        v = parse_version("0.0.0")
        assert (v.major, v.minor, v.patch) == (0, 0, 0)

    def test_large_version_numbers(self):
        """Test parsing numbers beyond 32 bits."""
        v = parse_version("2147483648.3.0")
        assert v.major == 2147483648
        assert parse_version("1.2.2147483648").patch == 2147483648

    def test_prerelease_identifiers(self):
        """Test pre-release is stored as identifiers."""
        v = parse_version("1.0.0-alpha.1")
        assert v.prerelease == ("alpha", "1")
        assert v.prerelease_text == "alpha.1"
        assert v.is_prerelease is True

    def test_metadata_identifiers(self):
        """Test metadata is stored as identifiers."""
        v = parse_version("1.0.0+build.123")
        assert v.metadata == ("build", "123")
        assert v.metadata_text == "build.123"
        assert v.is_prerelease is False

    def test_parts(self):
        """Test every component of a full version."""
        v = parse_version("1.2.3-beta.1+build.123")
        assert (v.major, v.minor, v.patch) == (1, 2, 3)
        assert v.prerelease_text == "beta.1"
        assert v.metadata_text == "build.123"

    def test_hyphenated_identifiers(self):
        """Test identifiers containing hyphens."""
        assert parse_version("1.2.3-rc1-with-hypen").prerelease == ("rc1-with-hypen",)
        assert parse_version("1.2.3-alpha.-1").prerelease == ("alpha", "-1")
        assert parse_version("1.2.0-x.Y.0+metadata-width-hypen").metadata == ("metadata-width-hypen",)

    def test_metadata_leading_zero_allowed(self):
        """Test metadata identifiers may start with zero."""
        assert parse_version("1.2.3+test.01").metadata == ("test", "01")

    def test_version_str(self):
        """Test Version string representation."""
        v = parse_version("1.2.3-alpha.1+build")
        assert str(v) == "1.2.3-alpha.1+build"

    def test_base_version(self):
        """Test base_version property."""
        v = parse_version("1.2.3-alpha.1+build")
        assert v.base_version == "1.2.3"

    def test_parse_strict_alias(self):
        """Test parse_strict is the strict grammar."""
        assert parse_strict("1.2.3") == parse_version("1.2.3")
        with pytest.raises(MalformedVersionError):
            parse_strict("v1.2.3")


class TestInvalidVersions:
    """Tests for invalid version strings."""

    def test_empty_string(self):
        """Test that empty string raises error."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("")
        assert exc_info.value.reason is Reason.EMPTY

    def test_whitespace_not_stripped(self):
        """Test that surrounding whitespace is rejected."""
        for text in ("   ", " 1.2.3", "1.2.3\n", "\n1.2"):
            with pytest.raises(MalformedVersionError):
                parse_version(text)

    def test_missing_patch(self):
        """Test that missing patch version raises error."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("1.0")
        assert exc_info.value.reason is Reason.SEGMENT_COUNT

    def test_v_prefix(self):
        """Test that a leading 'v' is rejected by the strict grammar."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("v1.2.3")
        assert exc_info.value.reason is Reason.V_PREFIX

    @pytest.mark.parametrize("text", ["01.1.1", "1.01.1", "1.1.01"])
    def test_leading_zeros(self, text):
        """Test that leading zeros in numeric parts raise error."""
        with pytest.raises(SegmentStartsWithZeroError) as exc_info:
            parse_version(text)
        assert exc_info.value.kind is ErrorKind.SEGMENT_STARTS_WITH_ZERO
        assert exc_info.value.reason is Reason.LEADING_ZERO

    def test_leading_zero_is_malformed(self):
        """Test that the leading-zero error is also a malformed-version error."""
        with pytest.raises(MalformedVersionError):
            parse_version("1.2.3-0123")

    def test_four_segments(self):
        """Test that four numeric segments are rejected."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("1.2.3.4")
        assert exc_info.value.reason is Reason.SEGMENT_COUNT

    def test_invalid_character(self):
        """Test that characters outside [0-9A-Za-z-] are rejected."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("1.0.0-alpha_beta")
        assert exc_info.value.reason is Reason.INVALID_CHARACTER

    def test_trailing_garbage(self):
        """Test that text after the numeric core is rejected."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("1.2.3beta")
        assert exc_info.value.reason is Reason.TRAILING_GARBAGE

    def test_empty_identifier(self):
        """Test that empty identifiers are rejected."""
        for text in ("1.0.0-alpha..1", "1.1.2+.123", "1.2.3-", "1.2.3+"):
            with pytest.raises(MalformedVersionError) as exc_info:
                parse_version(text)
            assert exc_info.value.reason is Reason.EMPTY_IDENTIFIER

    def test_multiple_metadata(self):
        """Test that a second '+' block is rejected."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("9.8.7+meta+meta")
        assert exc_info.value.reason is Reason.MULTIPLE_METADATA

    def test_out_of_range(self):
        """Test that segments beyond 64 bits are rejected."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("18446744073709551616.0.0")
        assert exc_info.value.reason is Reason.OUT_OF_RANGE
        assert parse_version("18446744073709551615.0.0").major == 2**64 - 1

    def test_non_string(self):
        """Test that non-string input raises error."""
        with pytest.raises(MalformedVersionError):
            parse_version(123)  # type: ignore[arg-type]


class TestLooseParsing:
    """Tests for the loose grammar."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.2.3", "1.2.3"),
            ("v1.2.3", "1.2.3"),
            ("V1.2.3", "1.2.3"),
            ("1.0", "1.0.0"),
            ("v1.0", "1.0.0"),
            ("1", "1.0.0"),
            ("v1", "1.0.0"),
            ("1.2-5", "1.2.0-5"),
            ("v1.2-5", "1.2.0-5"),
            ("1.2-beta.5", "1.2.0-beta.5"),
            ("v1.2-beta.5", "1.2.0-beta.5"),
            ("v1.2.0-x.Y.0+metadata", "1.2.0-x.Y.0+metadata"),
            ("v1.2.3-rc1-with-hypen", "1.2.3-rc1-with-hypen"),
            ("20221209-update-renovatejson-v4", "20221209.0.0-update-renovatejson-v4"),
        ],
    )
    def test_coerced_string(self, text, expected):
        """Test loose input becomes canonical while keeping the original text."""
        v = parse_loose(text)
        assert str(v) == expected
        assert v.original_text == text

    @pytest.mark.parametrize(
        "text",
        ["1.2.beta", "v1.2.beta", "foo", "1.2.3.4", "v1.2.3.4", "12.3.4.1234", "vv1", "v", "\nv1.2"],
    )
    def test_rejected(self, text):
        """Test inputs the loose grammar still rejects."""
        with pytest.raises(MalformedVersionError):
            parse_loose(text)

    @pytest.mark.parametrize("text", ["1.2.3beta", "1.2beta", "v1beta.1"])
    def test_prerelease_needs_hyphen(self, text):
        """Test a pre-release glued to the numbers is rejected."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_loose(text)
        assert exc_info.value.reason is Reason.TRAILING_GARBAGE

    def test_leading_zero_prerelease_rejected(self):
        """Test numeric pre-release identifiers with leading zero in both dialects."""
        for loose in (False, True):
            with pytest.raises(SegmentStartsWithZeroError):
                parse_version("1.2.3-01", loose=loose)
            assert parse_version("1.2.3-0", loose=loose).prerelease == ("0",)

    def test_v_prefix_flag(self):
        """Test had_v_prefix reflects the original text."""
        assert parse_loose("v1.2.4").had_v_prefix is True
        assert parse_loose("V1.2.4").had_v_prefix is True
        assert parse_loose("1.2.3").had_v_prefix is False


class TestIsValidSemver:
    """Tests for is_valid_semver function."""

    def test_valid(self):
        assert is_valid_semver("1.0.0") is True
        assert is_valid_semver("1.0.0-alpha+001") is True

    def test_invalid(self):
        assert is_valid_semver("1.0") is False
        assert is_valid_semver("") is False
        assert is_valid_semver(None) is False  # type: ignore[arg-type]

    def test_loose(self):
        assert is_valid_semver("v1.0", loose=True) is True
        assert is_valid_semver("v1.0") is False


class TestVersionConstruction:
    """Tests for building Version objects directly."""

    def test_new(self):
        """Test building versions from components."""
        assert str(Version(0, 1, 2)) == "0.1.2"
        assert str(Version(1, 2, 3, ("alpha", "1"), ("foo", "bar"))) == "1.2.3-alpha.1+foo.bar"

    def test_string_components(self):
        """Test dotted strings are split into identifiers."""
        v = Version(1, 2, 3, "alpha.1", "foo.bar")
        assert v.prerelease == ("alpha", "1")
        assert v.metadata == ("foo", "bar")

    def test_original_defaults_to_canonical(self):
        assert Version(1, 2, 3, "beta").original_text == "1.2.3-beta"

    def test_invalid_prerelease(self):
        with pytest.raises(InvalidPrereleaseError):
            Version(1, 2, 3, ("alpha", ""))
        with pytest.raises(InvalidPrereleaseError):
            Version(1, 2, 3, "01")

    def test_invalid_metadata(self):
        with pytest.raises(InvalidMetadataError):
            Version(1, 2, 3, (), ("a.b",))

    def test_non_string_identifiers(self):
        """Test identifiers given as non-strings are rejected."""
        with pytest.raises(InvalidPrereleaseError) as exc_info:
            Version(1, 2, 3, prerelease=(1,))
        assert exc_info.value.reason == Reason.INVALID_CHARACTER
        with pytest.raises(InvalidMetadataError):
            Version(1, 2, 3, metadata=("build", 7))

    def test_negative_segment(self):
        with pytest.raises(MalformedVersionError):
            Version(-1, 0, 0)

    def test_frozen(self):
        v = Version(1, 2, 3)
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore[misc]

    def test_equality_ignores_metadata(self):
        assert parse_version("1.2.3+foo") == parse_version("1.2.3+bar")
        assert hash(parse_version("1.2.3+foo")) == hash(parse_version("1.2.3+bar"))
        assert parse_version("1.2.3-beta") != parse_version("1.2.3")

    def test_equality_ignores_original_text(self):
        assert parse_loose("v1.2") == parse_version("1.2.0")


class TestIncrement:
    """Tests for increment_major/minor/patch."""

    @pytest.mark.parametrize(
        "text,how,expected,expected_original",
        [
            ("1.2.3", "patch", "1.2.4", "1.2.4"),
            ("v1.2.4", "patch", "1.2.5", "v1.2.5"),
            ("1.2.3", "minor", "1.3.0", "1.3.0"),
            ("v1.2.4", "minor", "1.3.0", "v1.3.0"),
            ("1.2.3", "major", "2.0.0", "2.0.0"),
            ("v1.2.4", "major", "2.0.0", "v2.0.0"),
            ("1.2.3+meta", "patch", "1.2.4", "1.2.4"),
            ("1.2.3-beta+meta", "patch", "1.2.4", "1.2.4"),
            ("v1.2.4-beta+meta", "patch", "1.2.5", "v1.2.5"),
            ("1.2.3-beta+meta", "minor", "1.3.0", "1.3.0"),
            ("1.2.3-beta+meta", "major", "2.0.0", "2.0.0"),
            ("v1.2", "patch", "1.2.1", "v1.2.1"),
        ],
    )
    def test_increment(self, text, how, expected, expected_original):
        v1 = parse_loose(text)
        v2 = getattr(v1, f"increment_{how}")()
        assert str(v2) == expected
        assert v2.original_text == expected_original
        assert v2.prerelease == ()
        assert v2.metadata == ()

    def test_receiver_untouched(self):
        v1 = parse_loose("v1.2.3-beta+meta")
        v1.increment_major()
        assert str(v1) == "1.2.3-beta+meta"
        assert v1.original_text == "v1.2.3-beta+meta"


class TestSetPrerelease:
    """Tests for set_prerelease."""

    def test_set(self):
        v = parse_version("1.2.3").set_prerelease("beta")
        assert v.prerelease_text == "beta"
        assert str(v) == "1.2.3-beta"
        assert v.original_text == "1.2.3-beta"

    def test_keeps_v_prefix(self):
        v = parse_loose("v1.2.4").set_prerelease("beta")
        assert str(v) == "1.2.4-beta"
        assert v.original_text == "v1.2.4-beta"

    def test_keeps_metadata(self):
        assert str(parse_version("1.2.3-alpha+build.7").set_prerelease("rc.1")) == "1.2.3-rc.1+build.7"

    def test_empty_clears(self):
        assert str(parse_version("1.2.3-alpha").set_prerelease("")) == "1.2.3"

    def test_invalid(self):
        original = parse_version("1.2.3")
        with pytest.raises(InvalidPrereleaseError) as exc_info:
            original.set_prerelease("**")
        err = exc_info.value
        assert err.kind is ErrorKind.INVALID_PRERELEASE
        assert err.reason is Reason.INVALID_CHARACTER
        assert err.version is original
        assert str(err.version) == "1.2.3"
        assert err.version.original_text == "1.2.3"

    def test_leading_zero(self):
        with pytest.raises(InvalidPrereleaseError) as exc_info:
            parse_version("1.2.3").set_prerelease("alpha.01")
        assert exc_info.value.reason is Reason.LEADING_ZERO


class TestSetMetadata:
    """Tests for set_metadata."""

    def test_set(self):
        v = parse_version("1.2.3").set_metadata("meta")
        assert v.metadata_text == "meta"
        assert str(v) == "1.2.3+meta"
        assert v.original_text == "1.2.3+meta"

    def test_keeps_v_prefix(self):
        v = parse_loose("v1.2.4").set_metadata("meta")
        assert v.original_text == "v1.2.4+meta"

    def test_leading_zero_allowed(self):
        assert parse_version("1.2.3").set_metadata("alpha.01").metadata == ("alpha", "01")

    def test_invalid(self):
        original = parse_version("1.2.3")
        with pytest.raises(InvalidMetadataError) as exc_info:
            original.set_metadata("foo☃")
        assert exc_info.value.kind is ErrorKind.INVALID_METADATA
        assert exc_info.value.version is original


class TestClearPrereleaseAndMetadata:
    def test_release(self):
        v = parse_loose("v1.2.3-rc.1+build.5").clear_prerelease_and_metadata()
        assert str(v) == "1.2.3"
        assert v.original_text == "v1.2.3"

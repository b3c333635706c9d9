# SPDX-License-Identifier: MIT
"""Unit tests for version equality."""

from semver_flag import (
    Version,
    parse_version,
    version_strings_equal,
    versions_equal,
)


class TestVersionsEqual:
    """Tests for versions_equal function."""

    def test_equal_versions(self):
        assert versions_equal(Version(1, 2, 3), Version(1, 2, 3)) is True

    def test_major_difference(self):
        assert versions_equal(Version(1, 0, 0), Version(2, 0, 0)) is False

    def test_minor_difference(self):
        assert versions_equal(Version(1, 0, 0), Version(1, 1, 0)) is False

    def test_patch_difference(self):
        assert versions_equal(Version(1, 0, 0), Version(1, 0, 1)) is False

    def test_parsed_and_constructed(self):
        assert versions_equal(parse_version("0.10.0"), Version(0, 10, 0)) is True


class TestVersionStringsEqual:
    """Tests for version_strings_equal function."""

    def test_equal_strings(self):
        """Test that identical versions compare as equal."""
        assert version_strings_equal("1.2.3", "1.2.3") is True

    def test_different_patch(self):
        """Test that versions differing in patch are not equal."""
        assert version_strings_equal("1.2.3", "1.2.4") is False

    def test_invalid_first(self):
        """Test that an invalid first version gives False, not an error."""
        assert version_strings_equal("bad", "1.2.3") is False

    def test_invalid_second(self):
        """Test that an invalid second version gives False, not an error."""
        assert version_strings_equal("1.2.3", "1.2") is False

    def test_both_invalid(self):
        """Test that two identical invalid strings are still not equal."""
        assert version_strings_equal("01.2.3", "01.2.3") is False

    def test_empty(self):
        assert version_strings_equal("", "") is False

    def test_very_long_field(self):
        """Test that a field too long for int() gives False, not an error."""
        assert version_strings_equal("1" * 5000 + ".0.0", "1.2.3") is False

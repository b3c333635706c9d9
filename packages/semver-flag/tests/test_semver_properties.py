# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and rendering.

These tests verify that:
- Rendering then parsing returns the same version for every in-range field
- Rendered versions never carry leading zeroes
- Any field with a leading zero is rejected
- Equality of strings agrees with equality of parsed versions
"""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from semver_flag import (
    MAX_FIELD_VALUE,
    InvalidVersionError,
    LeadingZeroError,
    Version,
    parse_version,
    render_version,
    version_strings_equal,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

field_values = st.integers(min_value=0, max_value=MAX_FIELD_VALUE)


@st.composite
def version_strategy(draw):
    """Generate a valid Version."""
    return Version(draw(field_values), draw(field_values), draw(field_values))


# Digit strings of two or more characters starting with '0'
leading_zero_fields = st.from_regex(r"0[0-9]+", fullmatch=True)


# =============================================================================
# Properties
# =============================================================================


class TestRoundTripProperties:
    """Round trip between Version and its string form."""

    @given(version=version_strategy())
    def test_parse_render_round_trip(self, version: Version):
        assert parse_version(render_version(version)) == version

    @given(version=version_strategy())
    def test_rendered_fields_have_no_leading_zeroes(self, version: Version):
        for part in render_version(version).split("."):
            assert part == "0" or not part.startswith("0")

    @given(version=version_strategy())
    def test_rendered_string_equals_itself(self, version: Version):
        text = render_version(version)
        assert version_strings_equal(text, text)


class TestRejectionProperties:
    """Inputs that must never parse."""

    @given(field=leading_zero_fields, index=st.integers(min_value=0, max_value=2))
    def test_leading_zero_rejected(self, field: str, index: int):
        parts = ["1", "2", "3"]
        parts[index] = field
        with pytest.raises(LeadingZeroError):
            parse_version(".".join(parts))

    @given(value=st.integers(min_value=MAX_FIELD_VALUE + 1, max_value=MAX_FIELD_VALUE * 4))
    def test_overflow_rejected(self, value: int):
        with pytest.raises(InvalidVersionError):
            parse_version(f"{value}.0.0")

    @given(text=st.text(alphabet="0123456789.", max_size=12))
    def test_parse_either_succeeds_or_raises_invalid_version(self, text: str):
        try:
            version = parse_version(text)
        except InvalidVersionError:
            return
        assert render_version(version) == text

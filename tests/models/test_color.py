"""
Tests for attachment color validation.
"""

import pytest

from slack_hook.errors import (
    HexColorError,
    HexColorLengthError,
    HexColorPrefixError,
    InvalidHexCharacterError,
)
from slack_hook.models.color import HexColor, SlackColor


class TestHexColorErrors:
    """Test suite for rejected colors."""

    def test_too_short(self):
        with pytest.raises(HexColorLengthError) as exc_info:
            HexColor("abc")
        assert str(exc_info.value) == (
            "hex color parsing error: Must be 4 or 7 characters long (including #): found `abc`"
        )

    def test_wrong_length_with_hash(self):
        for color in ["#", "#ab", "#abcd", "#abcde", "#abcdef0"]:
            with pytest.raises(HexColorLengthError):
                HexColor(color)

    def test_missing_hash(self):
        with pytest.raises(HexColorPrefixError) as exc_info:
            HexColor("1234567")
        assert "No leading #: found `1234567`" in str(exc_info.value)

    def test_invalid_hex_char(self):
        with pytest.raises(InvalidHexCharacterError) as exc_info:
            HexColor("#abc12z")
        err = exc_info.value
        assert err.character == "z"
        assert err.position == 5
        assert "Invalid character 'z' at position 5" in str(err)

    def test_invalid_hex_char_shorthand(self):
        """Position refers to the supplied shorthand, not its expanded form."""
        with pytest.raises(InvalidHexCharacterError) as exc_info:
            HexColor("#1g3")
        assert exc_info.value.character == "g"
        assert exc_info.value.position == 1

    def test_color_names_are_case_sensitive(self):
        with pytest.raises(HexColorError):
            HexColor("Good")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            HexColor("nope")


class TestHexColorOk:
    """Test suite for accepted colors, which round-trip unchanged."""

    @pytest.mark.parametrize(
        "color",
        ["good", "warning", "danger", "#d18", "#103D18", "#103d18", "#000", "#FFFFFF"],
    )
    def test_roundtrip(self, color):
        hex_color = HexColor(color)
        assert hex_color == color
        assert str(hex_color) == color

    def test_shorthand_is_not_expanded(self):
        assert HexColor("#d18") == "#d18"

    def test_slack_color_enum(self):
        assert HexColor(SlackColor.GOOD) == "good"
        assert HexColor(SlackColor.DANGER) == "danger"

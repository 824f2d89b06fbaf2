"""
Attachment Colors

A color is either one of Slack's built-in color names or a hex code such as
``#b13d41`` or the shorthand ``#000``. The string is validated once and then
kept exactly as supplied.
"""

import string
from enum import Enum
from typing import Union

from slack_hook.errors import (
    HexColorLengthError,
    HexColorPrefixError,
    InvalidHexCharacterError,
)


class SlackColor(str, Enum):
    """Default Slack colors built into the API."""

    GOOD = "good"  # green
    WARNING = "warning"  # orange
    DANGER = "danger"  # red


SLACK_COLORS = frozenset(color.value for color in SlackColor)

_HEX_DIGITS = frozenset(string.hexdigits)


class HexColor(str):
    """
    A validated color string.

    Accepts ``good``, ``warning``, ``danger`` (case-sensitive) or a 4 or 7
    character ``#``-prefixed hex code. No case or shorthand normalization is
    done: ``HexColor("#D18") == "#D18"``.

    Raises:
        HexColorLengthError: Not 4 or 7 characters long
        HexColorPrefixError: No leading ``#``
        InvalidHexCharacterError: A character after ``#`` is not a hex digit
    """

    def __new__(cls, color: Union[str, SlackColor]) -> "HexColor":
        if isinstance(color, SlackColor):
            color = color.value
        color = str(color)

        if color in SLACK_COLORS:
            return super().__new__(cls, color)

        if len(color) not in (4, 7):
            raise HexColorLengthError(color)
        if not color.startswith("#"):
            raise HexColorPrefixError(color)

        # #d18 -> #dd1188
        if len(color) == 4:
            hex_part = "".join(char * 2 for char in color[1:])
            scale = 2
        else:
            hex_part = color[1:]
            scale = 1

        for index, char in enumerate(hex_part):
            if char not in _HEX_DIGITS:
                # Report the position in the string the caller gave us
                raise InvalidHexCharacterError(color, char, index // scale)

        return super().__new__(cls, color)

    def __repr__(self) -> str:
        return f"HexColor({str.__repr__(self)})"

"""
Slack Hook Errors

Every failure raised by this package derives from SlackError, so callers can
catch a single type around building and sending a message.
"""

from typing import Optional


class SlackError(Exception):
    """Base class for all slack_hook errors."""


class HexColorError(SlackError, ValueError):
    """A color string is neither a Slack color name nor a valid hex code."""

    def __init__(self, message: str, color: str):
        super().__init__(f"hex color parsing error: {message}")
        self.color = color


class HexColorLengthError(HexColorError):
    def __init__(self, color: str):
        super().__init__(
            f"Must be 4 or 7 characters long (including #): found `{color}`", color
        )


class HexColorPrefixError(HexColorError):
    def __init__(self, color: str):
        super().__init__(f"No leading #: found `{color}`", color)


class InvalidHexCharacterError(HexColorError):
    """A character after the leading # is not a hex digit.

    ``position`` is the 0-based index within the hex portion of the color,
    i.e. the string without its leading ``#``.
    """

    def __init__(self, color: str, character: str, position: int):
        super().__init__(
            f"Invalid character {character!r} at position {position}: found `{color}`",
            color,
        )
        self.character = character
        self.position = position


class SlackUrlError(SlackError, ValueError):
    """A URL-typed field received something that does not parse as a URL."""

    def __init__(self, url: str, detail: str = ""):
        message = f"invalid url: `{url}`"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.url = url


class SlackChoiceError(SlackError, ValueError):
    """A value is not one of the choices an enum-typed field allows."""

    def __init__(self, name: str, value: object, choices: list):
        super().__init__(f"invalid {name}: {value!r} (expected one of {', '.join(choices)})")
        self.value = value


class SlackSerializationError(SlackError):
    """The payload could not be serialized to JSON."""


class SlackTransportError(SlackError):
    """The HTTP request to the webhook did not complete."""


class SlackServiceError(SlackError):
    """Slack answered the webhook request with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        message = f"slack service error: HTTP error {status_code}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body

"""
Slack Text Models

Text that ends up in a message is escaped once, when it enters the model.
Links and user mentions render to Slack's ``<...>`` markup and can be mixed
with plain text to build a message body.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Union

from slack_hook.utils.helpers import escape_text


class SlackText(str):
    """Text escaped per Slack's formatting rules (``&``, ``<``, ``>``)."""

    def __new__(cls, text: str = "") -> "SlackText":
        return super().__new__(cls, escape_text(str(text)))

    @classmethod
    def raw(cls, text: str) -> "SlackText":
        """Wrap text that is already rendered, without escaping it."""
        return str.__new__(cls, text)

    @classmethod
    def from_contents(cls, contents: Iterable["SlackTextContent"]) -> "SlackText":
        """
        Join mixed text, links and user mentions into one space-separated text.

        Plain ``str`` items are escaped; ``SlackText`` items are used as-is.
        """
        rendered = []
        for item in contents:
            if isinstance(item, (SlackText, SlackLink, SlackUserLink)):
                rendered.append(str(item))
            else:
                rendered.append(str(SlackText(item)))
        return cls.raw(" ".join(rendered))

    def __repr__(self) -> str:
        return f"SlackText({str.__repr__(self)})"


@dataclass(frozen=True)
class SlackLink:
    """
    A link rendered as ``<url|text>``.

    The url is kept as a plain string: Slack "urls" such as ``@USER`` or
    ``#C1234`` do not parse as standard URLs.
    """

    url: str
    text: SlackText

    def __post_init__(self):
        if not isinstance(self.text, SlackText):
            object.__setattr__(self, "text", SlackText(self.text))

    def __str__(self) -> str:
        return f"<{self.url}|{self.text}>"


@dataclass(frozen=True)
class SlackUserLink:
    """A user mention by id, rendered as ``<@U1234>``-style markup."""

    uid: str

    def __str__(self) -> str:
        return f"<{self.uid}>"


SlackTextContent = Union[SlackText, SlackLink, SlackUserLink]


def to_slack_text(value: Any) -> SlackText:
    """
    Coerce a value bound for a text field into SlackText.

    - SlackText: returned unchanged (already escaped)
    - SlackLink / SlackUserLink: rendered markup
    - list/tuple of content: joined with SlackText.from_contents
    - anything else: escaped
    """
    if isinstance(value, SlackText):
        return value
    if isinstance(value, (SlackLink, SlackUserLink)):
        return SlackText.raw(str(value))
    if isinstance(value, (list, tuple)):
        return SlackText.from_contents(value)
    return SlackText(value)

"""
Payload Model

The JSON object posted to an incoming webhook.
See https://api.slack.com/messaging/webhooks and
https://api.slack.com/methods/chat.postMessage
"""

from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from pydantic import AnyUrl, BaseModel, ConfigDict, field_serializer, field_validator
from pydantic_core import PydanticSerializationError

from slack_hook.errors import SlackSerializationError
from slack_hook.models.attachment import Attachment
from slack_hook.models.builder import BaseBuilder, enum_choice
from slack_hook.models.text import to_slack_text
from slack_hook.utils.helpers import validate_url


class Parse(str, Enum):
    """Change how messages are treated."""

    FULL = "full"
    NONE = "none"


class Payload(BaseModel):
    """
    Message sent to Slack.

    Neither text nor attachments is enforced; a message should carry at
    least one of them.
    """

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    channel: Optional[str] = None  # Defaults to the webhook's channel
    username: Optional[str] = None
    icon_url: Optional[AnyUrl] = None
    icon_emoji: Optional[str] = None
    attachments: Optional[Tuple[Attachment, ...]] = None
    unfurl_links: Optional[bool] = None
    unfurl_media: Optional[bool] = None
    link_names: Optional[bool] = None
    parse: Optional[Parse] = None

    @field_validator("text", mode="before")
    @classmethod
    def _escape_text(cls, v):
        if v is None:
            return v
        return to_slack_text(v)

    @field_serializer("link_names")
    def _serialize_link_names(self, link_names: Optional[bool]) -> Optional[int]:
        # Slack documents link_names as 1 / 0
        if link_names is None:
            return None
        return int(link_names)

    def to_dict(self) -> dict:
        """
        JSON-ready dict with unset fields omitted.

        Raises:
            SlackSerializationError: If pydantic cannot serialize a value
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise SlackSerializationError(f"could not serialize payload: {e}") from e

    def to_json(self) -> str:
        """Serialized JSON body, unset fields omitted."""
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise SlackSerializationError(f"could not serialize payload: {e}") from e


class PayloadBuilder(BaseBuilder):
    """
    Fluent builder for Payload.

    Example:
        payload = (
            PayloadBuilder()
            .text("Nightly build failed")
            .channel("#ops")
            .icon_emoji(":rotating_light:")
            .build()
        )
    """

    def text(self, text: Any) -> "PayloadBuilder":
        return self._set("text", to_slack_text(text))

    def channel(self, channel: str) -> "PayloadBuilder":
        return self._set("channel", channel)

    def username(self, username: str) -> "PayloadBuilder":
        return self._set("username", username)

    def icon_emoji(self, icon_emoji: str) -> "PayloadBuilder":
        """Emoji used as the icon, e.g. ``:ghost:``."""
        return self._set("icon_emoji", icon_emoji)

    def icon_url(self, url: str) -> "PayloadBuilder":
        return self._set_validated("icon_url", validate_url, url)

    def attachments(self, attachments: Iterable[Attachment]) -> "PayloadBuilder":
        return self._set("attachments", tuple(attachments))

    def unfurl_links(self, unfurl: bool) -> "PayloadBuilder":
        """Whether Slack fetches links and creates an attachment for them."""
        return self._set("unfurl_links", unfurl)

    def unfurl_media(self, unfurl: bool) -> "PayloadBuilder":
        """Pass False to disable unfurling of media content."""
        return self._set("unfurl_media", unfurl)

    def link_names(self, link: bool) -> "PayloadBuilder":
        """Find and link channel names and usernames."""
        return self._set("link_names", link)

    def parse(self, parse: Parse) -> "PayloadBuilder":
        return self._set_validated("parse", lambda value: enum_choice(Parse, value), parse)

    def build(self) -> Payload:
        """
        Build the Payload.

        Raises:
            SlackError: The first validation error hit by a setter
        """
        self._raise_if_failed()
        return Payload(**self._fields)

"""
Attachment Models

Slack allows attachments to be added to messages. See
https://api.slack.com/reference/messaging/attachments for the field reference.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Optional, Tuple, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field as ModelField,
    field_serializer,
    field_validator,
)

from slack_hook.models.builder import BaseBuilder, enum_choice
from slack_hook.models.color import HexColor, SlackColor
from slack_hook.models.text import to_slack_text
from slack_hook.utils.helpers import validate_url


class Section(str, Enum):
    """Parts of an attachment that can be formatted as markdown."""

    PRETEXT = "pretext"
    TEXT = "text"
    FIELDS = "fields"


class Action(BaseModel):
    """A button-like element displayed with the attachment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    action_type: str = ModelField(..., alias="type", description="Action type, e.g. 'button'")
    text: str = ModelField(..., description="Label shown on the action")
    name: str = ModelField(..., description="Name of the action")
    style: Optional[str] = ModelField(None, description="Style, e.g. 'primary' or 'danger'")
    value: Optional[str] = ModelField(None, description="Value sent back with the action")

    def __init__(
        self,
        action_type: str,
        text: str,
        name: str,
        style: Optional[str] = None,
        value: Optional[str] = None,
        **data: Any,
    ):
        super().__init__(
            action_type=action_type, text=text, name=name, style=style, value=value, **data
        )


class Field(BaseModel):
    """
    One row of the table displayed inside an attachment.

    The title is a bold heading and cannot contain markup. The value may be
    multi-line and is escaped like any other message text.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    value: str
    short: Optional[bool] = None  # Short enough to sit side-by-side with other fields

    def __init__(self, title: str, value: Any, short: Optional[bool] = None, **data: Any):
        super().__init__(title=title, value=value, short=short, **data)

    @field_validator("value", mode="before")
    @classmethod
    def _escape_value(cls, v):
        return to_slack_text(v)


class Attachment(BaseModel):
    """A visually distinct block inside a message. Build it with AttachmentBuilder."""

    model_config = ConfigDict(frozen=True)

    # Required plain-text summary, shown where markup isn't supported
    fallback: str
    text: Optional[str] = None
    pretext: Optional[str] = None
    color: Optional[str] = None
    actions: Optional[Tuple[Action, ...]] = None
    fields: Optional[Tuple[Field, ...]] = None
    author_name: Optional[str] = None
    author_link: Optional[AnyUrl] = None
    author_icon: Optional[AnyUrl] = None  # 16x16px image left of author_name
    title: Optional[str] = None
    title_link: Optional[AnyUrl] = None
    image_url: Optional[AnyUrl] = None
    thumb_url: Optional[AnyUrl] = None
    footer: Optional[str] = None
    footer_icon: Optional[AnyUrl] = None
    ts: Optional[datetime] = None
    mrkdwn_in: Optional[Tuple[Section, ...]] = None
    callback_id: Optional[str] = None

    @field_validator(
        "fallback", "text", "pretext", "author_name", "title", "footer", "callback_id",
        mode="before",
    )
    @classmethod
    def _escape_text(cls, v):
        if v is None:
            return v
        return to_slack_text(v)

    @field_validator("color", mode="before")
    @classmethod
    def _validate_color(cls, v):
        if v is None:
            return v
        return HexColor(v)

    @field_serializer("ts")
    def _serialize_ts(self, ts: Optional[datetime]) -> Optional[int]:
        if ts is None:
            return None
        # Naive datetimes are taken to be UTC
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return int(ts.timestamp())

    def to_dict(self) -> dict:
        """JSON-ready dict with unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AttachmentBuilder(BaseBuilder):
    """
    Fluent builder for Attachment.

    Example:
        attachment = (
            AttachmentBuilder("Deploy finished")
            .color("good")
            .fields([Field("env", "prod", True)])
            .title_link("https://ci.example.com/builds/42")
            .build()
        )

    ``color`` and the URL setters validate their input. The first failure is
    kept, every later setter is skipped, and ``build()`` raises it.
    """

    def __init__(self, fallback: Any):
        super().__init__(fallback=to_slack_text(fallback))

    def text(self, text: Any) -> "AttachmentBuilder":
        """Optional text that appears within the attachment."""
        return self._set("text", to_slack_text(text))

    def pretext(self, pretext: Any) -> "AttachmentBuilder":
        """Optional text that appears above the attachment block."""
        return self._set("pretext", to_slack_text(pretext))

    def color(self, color: Union[str, SlackColor]) -> "AttachmentBuilder":
        """
        Set the color of the attachment.

        One of ``good``, ``warning``, ``danger`` (or the SlackColor enum), or
        a hex code such as ``#b13d41`` or ``#000``.
        """
        return self._set_validated("color", HexColor, color)

    def actions(self, actions: Iterable[Action]) -> "AttachmentBuilder":
        return self._set("actions", tuple(actions))

    def fields(self, fields: Iterable[Field]) -> "AttachmentBuilder":
        """Fields displayed in a table inside the attachment."""
        return self._set("fields", tuple(fields))

    def author_name(self, author_name: Any) -> "AttachmentBuilder":
        return self._set("author_name", to_slack_text(author_name))

    def author_link(self, url: str) -> "AttachmentBuilder":
        """URL that hyperlinks author_name."""
        return self._set_validated("author_link", validate_url, url)

    def author_icon(self, url: str) -> "AttachmentBuilder":
        return self._set_validated("author_icon", validate_url, url)

    def title(self, title: Any) -> "AttachmentBuilder":
        """Larger, bolder text above the main body."""
        return self._set("title", to_slack_text(title))

    def title_link(self, url: str) -> "AttachmentBuilder":
        return self._set_validated("title_link", validate_url, url)

    def image_url(self, url: str) -> "AttachmentBuilder":
        return self._set_validated("image_url", validate_url, url)

    def thumb_url(self, url: str) -> "AttachmentBuilder":
        return self._set_validated("thumb_url", validate_url, url)

    def footer(self, footer: Any) -> "AttachmentBuilder":
        return self._set("footer", to_slack_text(footer))

    def footer_icon(self, url: str) -> "AttachmentBuilder":
        return self._set_validated("footer_icon", validate_url, url)

    def ts(self, ts: Union[datetime, int]) -> "AttachmentBuilder":
        """Timestamp displayed with the attachment; naive datetimes are UTC."""
        if isinstance(ts, (int, float)):
            ts = datetime.fromtimestamp(ts, tz=timezone.utc)
        return self._set("ts", ts)

    def markdown_in(self, sections: Iterable[Union[Section, str]]) -> "AttachmentBuilder":
        """Sections to be formatted as markdown."""
        return self._set_validated(
            "mrkdwn_in",
            lambda values: tuple(enum_choice(Section, value) for value in values),
            sections,
        )

    def callback_id(self, callback_id: Any) -> "AttachmentBuilder":
        return self._set("callback_id", to_slack_text(callback_id))

    def build(self) -> Attachment:
        """
        Build the Attachment.

        text is set to fallback when it was never given.

        Raises:
            SlackError: The first validation error hit by a setter
        """
        self._raise_if_failed()
        fields = dict(self._fields)
        if fields.get("text") is None:
            fields["text"] = fields["fallback"]
        return Attachment(**fields)

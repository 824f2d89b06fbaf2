"""
slack_hook

Build Slack incoming-webhook messages with escaped text and validated
colors, then send them.
"""

from slack_hook.errors import (
    SlackError,
    HexColorError,
    HexColorLengthError,
    HexColorPrefixError,
    InvalidHexCharacterError,
    SlackUrlError,
    SlackChoiceError,
    SlackSerializationError,
    SlackTransportError,
    SlackServiceError,
)
from slack_hook.models import (
    SlackText,
    SlackLink,
    SlackUserLink,
    SlackTextContent,
    HexColor,
    SlackColor,
    Action,
    Attachment,
    AttachmentBuilder,
    Field,
    Section,
    Parse,
    Payload,
    PayloadBuilder,
)
from slack_hook.integrations.slack import Slack

__version__ = "0.1.0"

__all__ = [
    "Slack",
    "SlackText",
    "SlackLink",
    "SlackUserLink",
    "SlackTextContent",
    "HexColor",
    "SlackColor",
    "Action",
    "Attachment",
    "AttachmentBuilder",
    "Field",
    "Section",
    "Parse",
    "Payload",
    "PayloadBuilder",
    "SlackError",
    "HexColorError",
    "HexColorLengthError",
    "HexColorPrefixError",
    "InvalidHexCharacterError",
    "SlackUrlError",
    "SlackChoiceError",
    "SlackSerializationError",
    "SlackTransportError",
    "SlackServiceError",
]

# Message models
from slack_hook.models.text import SlackText, SlackLink, SlackUserLink, SlackTextContent
from slack_hook.models.color import HexColor, SlackColor
from slack_hook.models.attachment import Action, Attachment, AttachmentBuilder, Field, Section
from slack_hook.models.payload import Parse, Payload, PayloadBuilder

__all__ = [
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
]

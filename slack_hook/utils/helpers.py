"""
Shared Utility Functions

Text escaping and URL validation used across the message models.
"""

import logging

from pydantic import AnyUrl, HttpUrl, TypeAdapter, ValidationError

from slack_hook.errors import SlackUrlError

logger = logging.getLogger(__name__)

# https://api.slack.com/reference/surfaces/formatting#escaping
_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

_url_adapter = TypeAdapter(AnyUrl)
_http_url_adapter = TypeAdapter(HttpUrl)


def escape_text(text: str) -> str:
    """
    Escape the three characters Slack treats as control characters.

    The text is scanned once, character by character, so an ``&`` produced
    by an earlier replacement is never escaped again. Calling this twice on
    the same text does double-escape it; apply it once, where raw text
    enters a message.

    Examples:
        "moo <&> moo" -> "moo &lt;&amp;&gt; moo"

    Args:
        text: Raw text

    Returns:
        Text safe for Slack's markup parser
    """
    return "".join(_ESCAPES.get(char, char) for char in text)


def validate_url(url: str) -> str:
    """
    Parse a URL and return its normalized string form.

    Examples:
        https://example.com -> https://example.com/

    Args:
        url: URL to validate

    Returns:
        Normalized URL string

    Raises:
        SlackUrlError: If the URL cannot be parsed
    """
    try:
        return str(_url_adapter.validate_python(str(url)))
    except ValidationError as e:
        detail = e.errors()[0].get("msg", "") if e.errors() else ""
        logger.debug(f"Rejected url {url!r}: {detail}")
        raise SlackUrlError(str(url), detail) from e


def validate_webhook_url(url: str) -> str:
    """
    Parse an incoming-webhook URL, which must be http or https.

    Raises:
        SlackUrlError: If the URL cannot be parsed or has another scheme
    """
    try:
        return str(_http_url_adapter.validate_python(str(url)))
    except ValidationError as e:
        detail = e.errors()[0].get("msg", "") if e.errors() else ""
        logger.debug(f"Rejected webhook url {url!r}: {detail}")
        raise SlackUrlError(str(url), detail) from e

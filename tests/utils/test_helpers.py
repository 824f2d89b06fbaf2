"""
Unit Tests for Utility Functions

Tests text escaping and URL validation.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import re

import pytest

from slack_hook.errors import SlackUrlError
from slack_hook.utils.helpers import escape_text, validate_url, validate_webhook_url


def test_escape_text_special_characters():
    """Test escape_text replaces &, < and >."""
    assert escape_text("moo <&> moo") == "moo &lt;&amp;&gt; moo"


def test_escape_text_identity_without_special_characters():
    """Test escape_text leaves ordinary text untouched."""
    for text in ["", "plain text", "emoji :tada: and *bold*", "line\nbreak", "ünïcødé"]:
        assert escape_text(text) == text


def test_escape_text_single_pass():
    """Test an ampersand produced by escaping is not escaped again."""
    assert escape_text("<") == "&lt;"
    assert escape_text("&lt;") == "&amp;lt;"
    assert escape_text("a&b") == "a&amp;b"


def test_escape_text_output_has_no_markup():
    """Test output never contains < or >, and every & starts an entity."""
    for text in ["<<>>", "&&&", "<a href='x'>&nbsp;</a>", "x > y & y < z"]:
        escaped = escape_text(text)
        assert "<" not in escaped
        assert ">" not in escaped
        stripped = re.sub(r"&(amp|lt|gt);", "", escaped)
        assert "&" not in stripped


def test_validate_url_normalizes():
    """Test validate_url returns the normalized URL string."""
    assert validate_url("https://example.com") == "https://example.com/"
    assert (
        validate_url("https://hooks.slack.com/services/abc/123/45z")
        == "https://hooks.slack.com/services/abc/123/45z"
    )


def test_validate_url_invalid():
    """Test that malformed URLs raise SlackUrlError."""
    for url in ["not-a-url", "", "://missing-scheme.com"]:
        with pytest.raises(SlackUrlError) as exc_info:
            validate_url(url)
        assert exc_info.value.url == url


def test_slack_url_error_is_value_error():
    with pytest.raises(ValueError):
        validate_url("not-a-url")


def test_validate_webhook_url():
    """Test webhook urls must be http or https."""
    hook = "https://hooks.slack.com/services/T000/B000/XXXX"
    assert validate_webhook_url(hook) == hook
    assert validate_webhook_url("http://127.0.0.1:8080/hook") == "http://127.0.0.1:8080/hook"
    for url in ["ftp://example.com/hook", "file:///tmp/hook", "not-a-url"]:
        with pytest.raises(SlackUrlError):
            validate_webhook_url(url)

"""
Utility package exports
"""

from slack_hook.utils.helpers import escape_text, validate_url, validate_webhook_url

__all__ = ["escape_text", "validate_url", "validate_webhook_url"]

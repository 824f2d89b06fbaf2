# Slack incoming webhook transport
from slack_hook.integrations.slack.client import Slack

__all__ = ["Slack"]

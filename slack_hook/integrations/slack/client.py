"""
Slack Incoming Webhook Client

Responsibilities:
- Hold one reusable slack_sdk WebhookClient bound to a validated hook URL
- POST a built Payload as JSON
- Map non-2xx responses to SlackServiceError and network failures to
  SlackTransportError
- No retries: the WebhookClient is created without retry handlers
"""

import asyncio
import logging
from typing import Optional

from slack_sdk.errors import SlackRequestError
from slack_sdk.webhook import WebhookClient, WebhookResponse

from slack_hook.config import get_settings
from slack_hook.errors import SlackServiceError, SlackTransportError
from slack_hook.models.payload import Payload
from slack_hook.utils.helpers import validate_webhook_url

logger = logging.getLogger(__name__)


class Slack:
    """Sends payloads to one Slack incoming webhook."""

    def __init__(
        self,
        hook: Optional[str] = None,
        *,
        timeout: Optional[int] = None,
        client: Optional[WebhookClient] = None,
    ):
        settings = get_settings()

        # Use configured webhook if none provided
        if hook is None:
            hook = settings.slack_webhook_url

        if not hook:
            raise ValueError("No hook provided and SLACK_WEBHOOK_URL not configured")

        self.hook = validate_webhook_url(hook)
        self.timeout = timeout if timeout is not None else settings.slack_timeout
        self.client = client or WebhookClient(
            url=self.hook,
            timeout=self.timeout,
            retry_handlers=[],
        )

    def send(self, payload: Payload) -> WebhookResponse:
        """
        Send payload to the webhook.

        Returns:
            The WebhookResponse of a 2xx answer

        Raises:
            SlackSerializationError: If the payload cannot be serialized
            SlackTransportError: If the request could not be made
            SlackServiceError: If Slack answers with a non-2xx status
        """
        body = payload.to_dict()

        try:
            logger.info(f"Sending payload to Slack webhook ({len(body.get('attachments', []))} attachments)")
            response = self.client.send_dict(body)
        except (OSError, SlackRequestError) as e:
            logger.error(f"Slack webhook request failed: {e}")
            raise SlackTransportError(f"webhook request failed: {e}") from e

        if 200 <= response.status_code < 300:
            logger.debug(f"Slack webhook accepted payload: {response.status_code} {response.body}")
            return response

        logger.error(f"Slack webhook error: {response.status_code} {response.body[:200] if response.body else ''}")
        raise SlackServiceError(response.status_code, response.body)

    async def send_async(self, payload: Payload) -> WebhookResponse:
        """Send payload without blocking the event loop."""
        return await asyncio.to_thread(self.send, payload)

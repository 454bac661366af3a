"""Delivery of delayed replies to the chat platform's response_url.

Deliveries are attempted once. Failures raise CallbackDeliveryError for the
caller to log; they are never retried.
"""

import logging

import httpx

from meme_hook.config import get_settings
from meme_hook.errors import CallbackDeliveryError
from meme_hook.models.reply import ReplyPayload

logger = logging.getLogger(__name__)


async def deliver_reply(response_url: str, reply: ReplyPayload) -> None:
    """POST the reply as JSON to the callback URL.

    Args:
        response_url: Callback URL from the original invocation.
        reply: Final reply to show the user.

    Raises:
        CallbackDeliveryError: On network errors or a non-2xx answer.
    """
    settings = get_settings()
    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(settings.callback_timeout)) as client:
            response = await client.post(response_url, json=reply.to_json())
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise CallbackDeliveryError(response_url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise CallbackDeliveryError(response_url, f"{type(exc).__name__}: {exc}") from exc

    logger.info("Delivered reply to %s (%d)", response_url, response.status_code)

"""Background worker that captions a meme and posts the final reply.

Runs after the acknowledgement has been sent. Nothing here can reach the
original HTTP exchange: every failure ends up either in the callback reply or
in the log.
"""

import logging

from meme_hook.command.callback import deliver_reply
from meme_hook.errors import CallbackDeliveryError
from meme_hook.imgflip.client import ImgflipClient
from meme_hook.models.caption import (
    CaptionApiError,
    CaptionOutcome,
    CaptionRequest,
    CaptionSuccess,
)
from meme_hook.models.reply import IMGFLIP_ICON_URL, ReplyPayload, ResponseType

logger = logging.getLogger(__name__)

FAILURE_TEXT = "Uhoh, something went wrong"


def failure_reply(message: str | None = None) -> ReplyPayload:
    """Private error reply, with the API's message appended when there is one."""
    text = f"{FAILURE_TEXT}: {message}" if message is not None else FAILURE_TEXT
    return ReplyPayload(
        text=text,
        response_type=ResponseType.EPHEMERAL,
        icon_url=IMGFLIP_ICON_URL,
        skip_slack_parsing=True,
    )


def build_final_reply(outcome: CaptionOutcome) -> ReplyPayload:
    """Map a captioning outcome to the reply posted to the callback URL.

    - success: image URL shown to the whole channel, linking to the imgflip page
    - API error: the API's message, private
    - anything else: generic failure text, private
    """
    if isinstance(outcome, CaptionSuccess):
        return ReplyPayload(
            text=outcome.url,
            response_type=ResponseType.IN_CHANNEL,
            icon_url=IMGFLIP_ICON_URL,
            goto_location=outcome.page_url,
            skip_slack_parsing=True,
        )
    if isinstance(outcome, CaptionApiError):
        return failure_reply(outcome.message)
    return failure_reply()


async def reply_with_meme(
    imgflip: ImgflipClient,
    caption_request: CaptionRequest,
    response_url: str,
) -> None:
    """Caption the meme, then deliver the outcome to response_url."""
    try:
        outcome = await imgflip.caption_image(caption_request)
    except Exception:
        logger.error(
            "Captioning failed unexpectedly for template %s",
            caption_request.template_id,
            exc_info=True,
        )
        reply = failure_reply()
    else:
        logger.info(
            "Captioned template %s: %s", caption_request.template_id, outcome.kind
        )
        reply = build_final_reply(outcome)

    try:
        await deliver_reply(response_url, reply)
    except CallbackDeliveryError as exc:
        logger.warning("Dropping reply for template %s: %s", caption_request.template_id, exc)

"""Slash command dispatch: answer now, caption later."""

import logging

from fastapi import BackgroundTasks

from meme_hook.command.interpreter import interpret_command
from meme_hook.command.worker import reply_with_meme
from meme_hook.imgflip.client import ImgflipClient
from meme_hook.models.invocation import Invocation
from meme_hook.models.reply import IMGFLIP_ICON_URL, ReplyPayload, ResponseType

logger = logging.getLogger(__name__)

ACKNOWLEDGEMENT_TEXT = "working on it"


def acknowledgement_reply() -> ReplyPayload:
    """Immediate private reply sent while the meme is being generated."""
    return ReplyPayload(
        text=ACKNOWLEDGEMENT_TEXT,
        response_type=ResponseType.EPHEMERAL,
        icon_url=IMGFLIP_ICON_URL,
        skip_slack_parsing=True,
    )


def handle_invocation(
    invocation: Invocation,
    background_tasks: BackgroundTasks,
    imgflip: ImgflipClient,
) -> ReplyPayload:
    """Return the synchronous reply and schedule captioning when needed.

    - no caption lines: usage reply, nothing scheduled
    - otherwise: acknowledgement, plus one background task that posts the
      meme (or an error) to the invocation's response_url after the
      response has been sent
    """
    interpreted = interpret_command(invocation)
    if isinstance(interpreted, ReplyPayload):
        logger.info("Usage reply for %s from user %s", invocation.command, invocation.user_name)
        return interpreted

    logger.info(
        "Dispatching template %s with %d box(es) from user %s in channel %s",
        interpreted.template_id,
        len(interpreted.boxes),
        invocation.user_name,
        invocation.channel_name,
    )
    background_tasks.add_task(
        reply_with_meme,
        imgflip,
        interpreted,
        str(invocation.response_url),
    )
    return acknowledgement_reply()

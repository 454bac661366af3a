"""Data models for the meme hook."""

from meme_hook.models.caption import (
    CaptionApiError,
    CaptionOutcome,
    CaptionRequest,
    CaptionSuccess,
    CaptionTransportError,
)
from meme_hook.models.invocation import Invocation
from meme_hook.models.reply import IMGFLIP_ICON_URL, ReplyPayload, ResponseType

__all__ = [
    "Invocation",
    "CaptionRequest",
    "CaptionOutcome",
    "CaptionSuccess",
    "CaptionApiError",
    "CaptionTransportError",
    "IMGFLIP_ICON_URL",
    "ReplyPayload",
    "ResponseType",
]

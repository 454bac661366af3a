"""Tests for the background meme worker.

The worker never raises: captioning failures become error replies and
callback delivery failures are only logged.
"""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from meme_hook.command.worker import build_final_reply, reply_with_meme
from meme_hook.errors import CallbackDeliveryError
from meme_hook.imgflip.client import ImgflipClient
from meme_hook.models.caption import (
    CaptionApiError,
    CaptionRequest,
    CaptionSuccess,
    CaptionTransportError,
)
from meme_hook.models.reply import IMGFLIP_ICON_URL, ResponseType

RESPONSE_URL = "https://chat.example.com/hooks/commands/abc"
REQUEST = CaptionRequest(template_id="181913649", boxes=["top text", "bottom text"])
SUCCESS = CaptionSuccess(url="https://i.imgflip.com/4abc.jpg", page_url="https://imgflip.com/i/4abc")


@pytest.fixture
def imgflip() -> MagicMock:
    mock = MagicMock(spec=ImgflipClient)
    mock.caption_image = AsyncMock(return_value=SUCCESS)
    return mock


@pytest.fixture
def mock_deliver():
    """Patch deliver_reply in the worker module."""
    with patch("meme_hook.command.worker.deliver_reply", new_callable=AsyncMock) as m:
        yield m


# -- build_final_reply --


def test_success_reply_is_public_with_goto():
    """Success shows the image URL to the channel and links the imgflip page."""
    reply = build_final_reply(SUCCESS)
    assert reply.text == "https://i.imgflip.com/4abc.jpg"
    assert reply.response_type == ResponseType.IN_CHANNEL
    assert reply.goto_location == "https://imgflip.com/i/4abc"
    assert reply.icon_url == IMGFLIP_ICON_URL
    assert reply.skip_slack_parsing is True


def test_api_error_reply_embeds_message():
    """An API error shows its message verbatim, privately."""
    reply = build_final_reply(CaptionApiError(message="rate limited"))
    assert reply.text == "Uhoh, something went wrong: rate limited"
    assert reply.response_type == ResponseType.EPHEMERAL
    assert reply.goto_location is None


def test_transport_error_reply_is_generic():
    """A transport error shows the generic failure text, privately."""
    reply = build_final_reply(CaptionTransportError(detail="ConnectError"))
    assert reply.text == "Uhoh, something went wrong"
    assert reply.response_type == ResponseType.EPHEMERAL
    assert reply.goto_location is None


# -- reply_with_meme --


async def test_success_delivered_to_callback(imgflip: MagicMock, mock_deliver: AsyncMock):
    """The captioned meme is posted to the invocation's callback URL."""
    await reply_with_meme(imgflip, REQUEST, RESPONSE_URL)

    imgflip.caption_image.assert_awaited_once_with(REQUEST)
    mock_deliver.assert_awaited_once()
    url, reply = mock_deliver.call_args.args
    assert url == RESPONSE_URL
    assert reply.text == "https://i.imgflip.com/4abc.jpg"
    assert reply.response_type == ResponseType.IN_CHANNEL


async def test_api_error_delivered_to_callback(imgflip: MagicMock, mock_deliver: AsyncMock):
    """An API error is delivered as a private error reply."""
    imgflip.caption_image.return_value = CaptionApiError(message="rate limited")

    await reply_with_meme(imgflip, REQUEST, RESPONSE_URL)

    reply = mock_deliver.call_args.args[1]
    assert reply.text == "Uhoh, something went wrong: rate limited"
    assert reply.response_type == ResponseType.EPHEMERAL


async def test_unexpected_error_delivers_generic_reply(
    imgflip: MagicMock, mock_deliver: AsyncMock, caplog: pytest.LogCaptureFixture
):
    """An unexpected exception still produces a generic reply and an error log."""
    imgflip.caption_image.side_effect = RuntimeError("boom")

    with caplog.at_level(logging.ERROR, logger="meme_hook.command.worker"):
        await reply_with_meme(imgflip, REQUEST, RESPONSE_URL)

    reply = mock_deliver.call_args.args[1]
    assert reply.text == "Uhoh, something went wrong"
    assert "Captioning failed unexpectedly" in caplog.text


async def test_delivery_failure_is_logged_not_raised(
    imgflip: MagicMock, mock_deliver: AsyncMock, caplog: pytest.LogCaptureFixture
):
    """A failed callback is logged once and never retried."""
    mock_deliver.side_effect = CallbackDeliveryError(RESPONSE_URL, "ConnectError: refused")

    with caplog.at_level(logging.WARNING, logger="meme_hook.command.worker"):
        await reply_with_meme(imgflip, REQUEST, RESPONSE_URL)

    mock_deliver.assert_awaited_once()
    assert "Dropping reply" in caplog.text
    assert "refused" in caplog.text

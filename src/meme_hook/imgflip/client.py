"""Async client for the imgflip caption_image API.

One instance is created at startup and shared by every background worker.
The underlying httpx.AsyncClient is reentrant, so no locking is needed.
Failed calls are not retried.
"""

import logging

import httpx
from pydantic import ValidationError

from meme_hook.errors import CaptioningApiError, CaptioningTransportError
from meme_hook.imgflip.models import ImgflipResponse
from meme_hook.models.caption import (
    CaptionApiError,
    CaptionOutcome,
    CaptionRequest,
    CaptionSuccess,
    CaptionTransportError,
)

logger = logging.getLogger(__name__)


def build_caption_form(request: CaptionRequest, username: str, password: str) -> dict[str, str]:
    """Build the form fields for a caption_image call.

    Each caption box becomes a `boxes[i][text]` field, in order.
    """
    form = {
        "template_id": request.template_id,
        "username": username,
        "password": password,
    }
    for index, text in enumerate(request.boxes):
        form[f"boxes[{index}][text]"] = text
    return form


class ImgflipClient:
    """Caption meme templates through an imgflip account."""

    def __init__(
        self,
        username: str,
        password: str,
        api_url: str = "https://api.imgflip.com/caption_image",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._username = username
        self._password = password
        self._api_url = api_url
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def caption_image(self, request: CaptionRequest) -> CaptionOutcome:
        """Caption a template and return the outcome. Never raises for API or network failures."""
        try:
            image = await self._caption(request)
        except CaptioningApiError as exc:
            logger.warning("imgflip rejected template %s: %s", request.template_id, exc.message)
            return CaptionApiError(message=exc.message)
        except CaptioningTransportError as exc:
            logger.warning("imgflip call failed for template %s: %s", request.template_id, exc)
            return CaptionTransportError(detail=str(exc))
        return image

    async def _caption(self, request: CaptionRequest) -> CaptionSuccess:
        form = build_caption_form(request, self._username, self._password)
        try:
            response = await self._http.post(self._api_url, data=form)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise CaptioningTransportError(f"{type(exc).__name__}: {exc}") from exc

        try:
            envelope = ImgflipResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise CaptioningTransportError("Unreadable caption_image response") from exc

        if not envelope.success:
            raise CaptioningApiError(envelope.error_message or "unknown error")
        if envelope.data is None:
            raise CaptioningTransportError("caption_image succeeded without image data")
        return CaptionSuccess(url=envelope.data.url, page_url=envelope.data.page_url)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

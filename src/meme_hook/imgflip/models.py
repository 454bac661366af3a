"""Wire models for the imgflip caption_image API."""

from pydantic import BaseModel


class ImgflipImage(BaseModel):
    """The `data` object of a successful caption_image response."""

    url: str
    page_url: str


class ImgflipResponse(BaseModel):
    """caption_image response envelope.

    `{"success": true, "data": {...}}` or `{"success": false, "error_message": "..."}`.
    """

    success: bool
    data: ImgflipImage | None = None
    error_message: str | None = None

"""Caption request and captioning outcome models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CaptionRequest(BaseModel):
    """A meme template id plus the ordered caption box texts."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    boxes: list[str] = Field(min_length=1)


class CaptionSuccess(BaseModel):
    """The captioning API generated an image."""

    kind: Literal["success"] = "success"
    url: str  # Direct image URL
    page_url: str  # imgflip page for the image


class CaptionApiError(BaseModel):
    """The captioning API rejected the request with a message."""

    kind: Literal["api_error"] = "api_error"
    message: str


class CaptionTransportError(BaseModel):
    """The captioning API could not be reached or its answer was unreadable."""

    kind: Literal["transport_error"] = "transport_error"
    detail: str = ""


CaptionOutcome = CaptionSuccess | CaptionApiError | CaptionTransportError

"""Reply payload returned to the chat platform."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

IMGFLIP_ICON_URL = "https://imgflip.com/imgflip_white_96.png"


class ResponseType(str, Enum):
    """Visibility of a reply in the channel."""

    EPHEMERAL = "ephemeral"  # Only the invoking user sees it
    IN_CHANNEL = "in_channel"


class ReplyPayload(BaseModel):
    """Message shown to the user, as an HTTP response or a callback POST body."""

    model_config = ConfigDict(frozen=True)

    text: str | None = None
    response_type: ResponseType | None = None
    username: str | None = None
    channel_id: str | None = None
    icon_url: str | None = None
    goto_location: str | None = None  # Set only when a meme was generated
    skip_slack_parsing: bool | None = None

    def to_json(self) -> dict:
        """Serialize for the wire, omitting unset fields."""
        return self.model_dump(mode="json", exclude_none=True)

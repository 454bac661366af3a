"""Slash command invocation model."""

from pydantic import BaseModel, ConfigDict, HttpUrl, StrictStr


class Invocation(BaseModel):
    """A decoded slash command request as sent by the chat platform."""

    model_config = ConfigDict(frozen=True)

    channel_id: StrictStr
    channel_name: StrictStr
    command: StrictStr  # e.g. "/meme"
    response_url: HttpUrl  # Callback URL for the delayed reply
    team_domain: StrictStr
    team_id: StrictStr
    text: StrictStr
    token: StrictStr
    trigger_id: StrictStr
    user_id: StrictStr
    user_name: StrictStr

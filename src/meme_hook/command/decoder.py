"""Decoding of form-encoded slash command requests."""

from collections.abc import Mapping
from typing import Any

from fastapi import Depends, Request
from pydantic import ValidationError

from meme_hook.command.auth import require_token
from meme_hook.errors import DecodeError
from meme_hook.models.invocation import Invocation


def decode_invocation(form: Mapping[str, Any]) -> Invocation:
    """Decode form fields into an Invocation.

    Unknown fields are ignored. Raises DecodeError naming every field that is
    missing, not a string, or (for `response_url`) not an absolute http(s) URL.
    """
    fields = {name: form[name] for name in Invocation.model_fields if name in form}
    try:
        return Invocation.model_validate(fields)
    except ValidationError as exc:
        invalid = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise DecodeError(invalid) from exc


async def authorized_invocation(
    request: Request,
    _credential: str = Depends(require_token),
) -> Invocation:
    """FastAPI dependency: authorize first, then decode the form body."""
    form = await request.form()
    return decode_invocation(form)

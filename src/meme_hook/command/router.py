"""Slash command webhook router with token authentication."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from meme_hook.command.decoder import authorized_invocation
from meme_hook.command.handlers import handle_invocation
from meme_hook.imgflip.client import ImgflipClient
from meme_hook.models.invocation import Invocation

router = APIRouter(prefix="", tags=["command"])


def get_imgflip_client(request: Request) -> ImgflipClient:
    """Shared imgflip client created at startup (see app lifespan)."""
    return request.app.state.imgflip


@router.post("/")
async def slash_command(
    background_tasks: BackgroundTasks,
    invocation: Invocation = Depends(authorized_invocation),
    imgflip: ImgflipClient = Depends(get_imgflip_client),
) -> JSONResponse:
    """Receive a slash command invocation.

    Authentication and form decoding happen in dependencies; failures there
    become problem+json responses before anything is scheduled.
    """
    reply = handle_invocation(invocation, background_tasks, imgflip)
    return JSONResponse(reply.to_json())

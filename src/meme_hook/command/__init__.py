"""Slash command ingress: token authentication, decoding, dispatch and delayed replies."""

from meme_hook.command.auth import is_accepted_token, parse_authorization
from meme_hook.command.decoder import decode_invocation
from meme_hook.command.handlers import handle_invocation
from meme_hook.command.interpreter import interpret_command
from meme_hook.command.router import router
from meme_hook.command.worker import reply_with_meme

__all__ = [
    "decode_invocation",
    "handle_invocation",
    "interpret_command",
    "is_accepted_token",
    "parse_authorization",
    "reply_with_meme",
    "router",
]

"""Slash command text parsing."""

from meme_hook.models.caption import CaptionRequest
from meme_hook.models.invocation import Invocation
from meme_hook.models.reply import IMGFLIP_ICON_URL, ReplyPayload, ResponseType

EXAMPLE_TEMPLATE_ID = "181913649"


def usage_reply(command: str) -> ReplyPayload:
    """Build the private usage hint for a slash command, e.g. `/meme`."""
    text = (
        f"Usage: `{command} <id>⇧⏎<text>⇧⏎…`\n"
        "Example:\n"
        f"```{command} {EXAMPLE_TEMPLATE_ID}\n"
        "making memes yourself\n"
        "using a bot to make memes```"
    )
    return ReplyPayload(
        text=text,
        response_type=ResponseType.EPHEMERAL,
        icon_url=IMGFLIP_ICON_URL,
        skip_slack_parsing=True,
    )


def split_lines(text: str) -> list[str]:
    r"""Split on "\n" line endings, where "\r\n" also counts as one ending.

    A trailing line ending does not produce an extra empty line. Other
    separators (a bare "\r", form feed, U+2028) stay inside their line.
    """
    *terminated, last = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if last:
        lines.append(last)
    return lines


def interpret_command(invocation: Invocation) -> CaptionRequest | ReplyPayload:
    """Split the command text into a template id and caption boxes.

    The first line is the template id and every following line is one caption
    box. Returns the usage reply when there are no caption lines.
    """
    lines = split_lines(invocation.text)
    if len(lines) < 2:
        return usage_reply(invocation.command)
    return CaptionRequest(template_id=lines[0], boxes=lines[1:])

"""Token authentication for slash command requests.

The chat platform sends `Authorization: Token <token>`; the token must be one
of the configured slash command tokens.
"""

import hmac
from collections.abc import Collection

from fastapi import Depends, Request

from meme_hook.errors import InvalidToken, MalformedHeader

TOKEN_AUTHORIZATION_SCHEME = b"Token"


def parse_authorization(header: str | bytes | None) -> str:
    """Extract the credential from a raw `Authorization` header value.

    The value must be the scheme, a single space, then the credential. The
    credential is returned as-is (no trimming).

    Raises MalformedHeader if the header is missing, uses another scheme, has
    nothing after the scheme, or the credential is not valid UTF-8.
    """
    if header is None:
        raise MalformedHeader("Missing `Authorization` header.")
    raw = header.encode("utf-8") if isinstance(header, str) else header

    scheme_len = len(TOKEN_AUTHORIZATION_SCHEME)
    if not (
        raw.startswith(TOKEN_AUTHORIZATION_SCHEME)
        and len(raw) > scheme_len
        and raw[scheme_len] == ord(" ")
    ):
        raise MalformedHeader("Invalid `Authorization` header value.")

    try:
        return raw[scheme_len + 1 :].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedHeader("`Authorization` credential is not valid UTF-8.") from exc


def is_accepted_token(credential: str, accepted: Collection[str]) -> bool:
    """Return True iff the credential exactly equals one of the accepted tokens."""
    presented = credential.encode("utf-8")
    return any(hmac.compare_digest(presented, token.encode("utf-8")) for token in accepted)


def authorize(credential: str, accepted: Collection[str]) -> str:
    """Return the credential if accepted, otherwise raise InvalidToken."""
    if not is_accepted_token(credential, accepted):
        raise InvalidToken()
    return credential


def get_accepted_tokens(request: Request) -> tuple[str, ...]:
    """Accepted tokens resolved once at startup (see app lifespan)."""
    return request.app.state.accepted_tokens


async def require_token(
    request: Request,
    accepted: tuple[str, ...] = Depends(get_accepted_tokens),
) -> str:
    """FastAPI dependency: parse and authorize the `Authorization` header.

    Reads the raw header bytes so non-UTF-8 credentials can be rejected.
    """
    header = next(
        (value for key, value in request.headers.raw if key.lower() == b"authorization"),
        None,
    )
    return authorize(parse_authorization(header), accepted)

"""Exception types for the meme hook and their problem+json rendering.

Request-path failures (`RequestRejected` subclasses) carry everything needed to
render an RFC 7807 problem document. Failures after the acknowledgement has
been sent (captioning, callback delivery) are never rendered as HTTP errors.
"""

from fastapi import status
from fastapi.responses import JSONResponse

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class MemeHookError(Exception):
    """Base class for all meme hook errors."""


class RequestRejected(MemeHookError):
    """A request rejected before any work was scheduled."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    title: str = "Bad Request"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_problem(self) -> dict:
        return problem_document(self.status_code, self.title, self.detail)


class MalformedHeader(RequestRejected):
    """The Authorization header is absent or not `Token <credential>`."""

    title = "Invalid `Authorization` header."

    def __init__(self, detail: str = "Expected an `Authorization: Token <token>` header.") -> None:
        super().__init__(detail)


class InvalidToken(RequestRejected):
    """The presented token is well-formed but not an accepted token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    title = "Invalid token."

    def __init__(self, detail: str = "The passed token was invalid.") -> None:
        super().__init__(detail)


class DecodeError(RequestRejected):
    """The form body is missing required fields or has malformed ones."""

    title = "Invalid slash command request."

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing or invalid field(s): {', '.join(self.fields)}")

    def to_problem(self) -> dict:
        problem = super().to_problem()
        problem["invalid_fields"] = self.fields
        return problem


class CaptioningError(MemeHookError):
    """The captioning API call did not produce an image."""


class CaptioningApiError(CaptioningError):
    """The captioning API answered with a structured failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CaptioningTransportError(CaptioningError):
    """The captioning API was unreachable or answered with garbage."""


class CallbackDeliveryError(MemeHookError):
    """POSTing the final reply to the callback URL failed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Callback delivery to {url} failed: {reason}")
        self.url = url
        self.reason = reason


def problem_document(status_code: int, title: str, detail: str | None = None) -> dict:
    """Build an RFC 7807 problem document body."""
    problem = {"type": "about:blank", "title": title, "status": status_code}
    if detail:
        problem["detail"] = detail
    return problem


def problem_response(problem: dict) -> JSONResponse:
    """Wrap a problem document in a JSONResponse with the problem media type."""
    return JSONResponse(
        problem,
        status_code=problem["status"],
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )

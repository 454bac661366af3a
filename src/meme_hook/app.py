"""FastAPI application with lifespan, health endpoint and problem+json errors."""

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meme_hook.command.router import router as command_router
from meme_hook.config import get_settings
from meme_hook.errors import RequestRejected, problem_document, problem_response
from meme_hook.imgflip.client import ImgflipClient
from meme_hook.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, load config and build shared clients."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.accepted_tokens = settings.accepted_tokens()
    app.state.imgflip = ImgflipClient(
        username=settings.imgflip_username,
        password=settings.imgflip_password.get_secret_value(),
        api_url=settings.imgflip_api_url,
        timeout=settings.imgflip_timeout,
    )
    logger.info(
        "Meme hook ready with %d accepted token(s)", len(app.state.accepted_tokens)
    )
    yield
    await app.state.imgflip.aclose()


app = FastAPI(
    title="Meme Hook",
    lifespan=lifespan,
)
app.include_router(command_router)


@app.exception_handler(RequestRejected)
async def handle_rejected_request(request: Request, exc: RequestRejected) -> JSONResponse:
    """Render authentication and decoding failures as problem documents."""
    logger.warning(
        "Rejected %s %s: %d %s", request.method, request.url.path, exc.status_code, exc.title
    )
    return problem_response(exc.to_problem())


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework errors (unreadable body, unknown route, wrong method) as problem documents."""
    logger.warning(
        "HTTP error on %s %s: %d %s", request.method, request.url.path, exc.status_code, exc.detail
    )
    response = problem_response(
        problem_document(exc.status_code, HTTPStatus(exc.status_code).phrase, exc.detail)
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Render anything unclassified as a 500 problem document."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return problem_response(problem_document(500, "Internal Server Error"))


@app.get("/health")
async def health():
    """Health check endpoint for container platforms and local development."""
    return {
        "status": "ok",
        "service": "meme-hook",
        "version": "0.1.0",
    }

"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from meme_hook.app import app
from meme_hook.command.auth import get_accepted_tokens
from meme_hook.command.router import get_imgflip_client
from meme_hook.imgflip.client import ImgflipClient

TEST_TOKENS = ("abc123", "second-token")


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def imgflip() -> MagicMock:
    """An ImgflipClient stand-in whose caption_image is an AsyncMock."""
    mock = MagicMock(spec=ImgflipClient)
    mock.caption_image = AsyncMock()
    return mock


@pytest.fixture
def hook_client(imgflip: MagicMock):
    """TestClient with accepted tokens and the imgflip client overridden.

    The lifespan is not entered, so no real settings or HTTP clients are built.
    """
    app.dependency_overrides[get_accepted_tokens] = lambda: TEST_TOKENS
    app.dependency_overrides[get_imgflip_client] = lambda: imgflip
    yield TestClient(app)
    app.dependency_overrides.clear()

"""Tests for the JSON logging configuration."""

from unittest.mock import patch

from meme_hook.logging_config import LOGGING_CONFIG, configure_logging


def test_configure_logging_sets_level():
    """The requested level is applied to the root logger without mutating the template."""
    with patch("meme_hook.logging_config.logging.config.dictConfig") as mock_dict_config:
        configure_logging("debug")

    applied = mock_dict_config.call_args.args[0]
    assert applied["root"]["level"] == "DEBUG"
    assert LOGGING_CONFIG["root"]["level"] == "INFO"


def test_json_formatter_uses_gcp_field_names():
    """severity/timestamp/logger are renamed for structured log ingestion."""
    formatter = LOGGING_CONFIG["formatters"]["json"]
    assert formatter["rename_fields"]["levelname"] == "severity"
    assert formatter["static_fields"] == {"service": "meme-hook"}


def test_http_client_loggers_quieted():
    """httpx/httpcore request lines are kept out of INFO output."""
    assert LOGGING_CONFIG["loggers"]["httpx"]["level"] == "WARNING"
    assert LOGGING_CONFIG["loggers"]["httpcore"]["level"] == "WARNING"

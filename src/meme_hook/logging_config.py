"""JSON logging for the meme hook.

Every record goes to stdout as one JSON object, with `severity`, `timestamp`
and `logger` keys and a fixed `service: meme-hook` field. httpx and httpcore
are held at WARNING because their INFO lines repeat every imgflip and
callback request, callback URLs included.
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "meme-hook",
            },
        },
    },
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
    },
    "root": {
        "level": "INFO",
        "handlers": ["stdout"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON handler on the root logger at `level` (e.g. "debug").

    The module-level template is copied so repeated calls with different
    levels do not leak into each other.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)

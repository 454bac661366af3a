"""Run the meme hook with uvicorn: `python -m meme_hook`."""

import uvicorn

from meme_hook.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "meme_hook.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

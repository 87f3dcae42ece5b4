#!/usr/bin/env python3
"""Run the subtrack web server."""
from dotenv import load_dotenv
load_dotenv()

import logging

from subtrack.config import get_settings
from subtrack.logging_setup import configure_logging

logger = logging.getLogger("subtrack.server")


def main():
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info(
        f"Starting {settings.APP_NAME} {settings.APP_VERSION} on "
        f"http://{settings.API_HOST}:{settings.API_PORT} (docs at /docs, reload={settings.API_RELOAD})"
    )

    uvicorn.run(
        "server.app:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        log_config=None,
    )


if __name__ == "__main__":
    main()

"""Run the service: ``python -m hillchart``."""

from __future__ import annotations

import logging

import uvicorn

from hillchart.config import settings
from hillchart.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    logger.info("Listening on http://%s:%d", settings.hillchart_host, settings.hillchart_port)
    uvicorn.run(
        app,
        host=settings.hillchart_host,
        port=settings.hillchart_port,
        log_level=settings.hillchart_log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hillchart import __version__
from hillchart.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.hillchart_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Hill Chart",
        description="Renders hill charts as PNG, JPEG or SVG images",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from hillchart.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()

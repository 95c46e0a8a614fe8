"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from hillchart.api import chart, health

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(chart.router)

"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from hillchart.config import Settings, settings
from hillchart.engine.renderer import HillChartRenderer
from hillchart.engine.theme import Theme


def get_settings() -> Settings:
    return settings


@lru_cache
def _renderer_for_density(pixel_density: int) -> HillChartRenderer:
    return HillChartRenderer(Theme(pixel_density=pixel_density))


def get_renderer() -> HillChartRenderer:
    return _renderer_for_density(settings.pixel_density)

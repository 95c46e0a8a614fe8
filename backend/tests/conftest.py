"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from hillchart.engine.renderer import HillChartRenderer
from hillchart.engine.theme import CLASSIC_THEME, DEFAULT_THEME

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"

# Default canvas: 200px * density 2 = 400 tall, 3:1
WIDTH = 1200
HEIGHT = 400


def open_image(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


@pytest.fixture
def renderer() -> HillChartRenderer:
    return HillChartRenderer(DEFAULT_THEME)


@pytest.fixture
def classic_renderer() -> HillChartRenderer:
    return HillChartRenderer(CLASSIC_THEME)

"""Hill chart rendering service."""

from hillchart.engine.renderer import HillChartRenderer, render
from hillchart.models.options import ImageFormat, RenderOptions

__version__ = "0.1.0"

__all__ = [
    "HillChartRenderer",
    "ImageFormat",
    "RenderOptions",
    "render",
]

"""Hill curve geometry and chart composition."""

from hillchart.engine.curve import (
    CurveGeometry,
    active_quadrant,
    area_under_curve,
    bezier_point,
    evaluate_curve,
    quadrant_boundaries,
)
from hillchart.engine.renderer import HillChartRenderer, render
from hillchart.engine.theme import CanvasDimensions, Theme

__all__ = [
    "CanvasDimensions",
    "CurveGeometry",
    "HillChartRenderer",
    "Theme",
    "active_quadrant",
    "area_under_curve",
    "bezier_point",
    "evaluate_curve",
    "quadrant_boundaries",
    "render",
]

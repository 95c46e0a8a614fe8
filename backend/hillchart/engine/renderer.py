"""Hill chart renderer — composes the chart on a drawing surface.

Steps run in a fixed order and each paints over the previous one:

    background → area under curve → curve + dividers → marker → labels → title

Every step draws inside ``surface.scoped()`` so no style leaks into the next.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from hillchart.engine.curve import (
    QUARTER,
    CurveGeometry,
    active_quadrant,
    area_under_curve,
    quadrant_boundaries,
)
from hillchart.engine.theme import DEFAULT_THEME, Theme
from hillchart.models.options import ImageFormat, RenderOptions, clamp_progress
from hillchart.svg.encoder import encode
from hillchart.svg.surface import SvgSurface

logger = logging.getLogger(__name__)

DrawStep = Callable[[SvgSurface, float, RenderOptions], None]


class HillChartRenderer:
    """Draws hill charts with a fixed theme."""

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme or DEFAULT_THEME
        dims = self.theme.dimensions
        self.width = dims.width
        self.height = dims.height
        self.geometry = CurveGeometry(self.width, self.height, self.theme.ypeak_factor)
        self.steps: list[tuple[str, DrawStep]] = [
            ("background", self.draw_background),
            ("area", self.draw_area_under_curve),
            ("curve", self.draw_curve),
            ("marker", self.draw_marker),
            ("labels", self.draw_labels),
            ("title", self.draw_title),
        ]

    def compose(self, t: float, options: RenderOptions | None = None) -> SvgSurface:
        """Run every draw step for progress ``t`` and return the surface."""
        t = clamp_progress(t)
        options = options or RenderOptions()
        surface = SvgSurface(self.width, self.height)

        for name, step in self.steps:
            t0 = time.perf_counter()
            step(surface, t, options)
            logger.debug("  %s drawn in %.2fms", name, (time.perf_counter() - t0) * 1000)

        return surface

    def render(
        self,
        t: float,
        fmt: ImageFormat | str | None = ImageFormat.JPG,
        options: RenderOptions | None = None,
    ) -> bytes:
        """Compose and encode. Any failure propagates; nothing partial is returned."""
        if not isinstance(fmt, ImageFormat):
            fmt = ImageFormat.parse(fmt)
        start = time.perf_counter()
        try:
            data = encode(self.compose(t, options), fmt)
        except Exception:
            logger.exception("Hill chart render failed (t=%s, format=%s)", t, fmt.value)
            raise
        logger.info(
            "Rendered hill chart t=%.2f as %s in %.0fms",
            clamp_progress(t),
            fmt.value,
            (time.perf_counter() - start) * 1000,
        )
        return data

    # ── Draw steps ──

    def draw_background(self, surface: SvgSurface, t: float, options: RenderOptions) -> None:
        with surface.scoped():
            surface.fill_style = self.theme.background
            surface.fill_rect(0, 0, self.width, self.height)

    def draw_area_under_curve(self, surface: SvgSurface, t: float, options: RenderOptions) -> None:
        sx = active_quadrant(t)
        polygon = area_under_curve(
            self.width, self.height, sx, sx + QUARTER, self.theme.ypeak_factor
        )
        with surface.scoped():
            surface.fill_style = self.theme.hill_fill
            surface.begin_path()
            surface.move_to(*polygon[0])
            for x, y in polygon[1:]:
                surface.line_to(x, y)
            surface.close_path()
            surface.fill()

    def draw_curve(self, surface: SvgSurface, t: float, options: RenderOptions) -> None:
        theme, geom = self.theme, self.geometry
        dash = geom.inset * theme.divider_dash_factor

        with surface.scoped():
            surface.stroke_style = theme.divider_color
            surface.line_width = theme.scaled(theme.divider_width)
            surface.set_line_dash([dash, dash])
            for (x, y), (bx, by) in quadrant_boundaries(
                self.width, self.height, theme.ypeak_factor
            ):
                surface.begin_path()
                surface.move_to(bx, by)
                surface.line_to(x, y)
                surface.stroke()

        with surface.scoped():
            surface.stroke_style = theme.curve_color
            surface.line_width = theme.scaled(theme.curve_width)
            surface.begin_path()
            surface.move_to(0, geom.ybase)
            for (c1x, c1y), (c2x, c2y), (ex, ey) in geom.segments():
                surface.bezier_curve_to(c1x, c1y, c2x, c2y, ex, ey)
            surface.stroke()

    def marker_radius(self) -> float:
        theme = self.theme
        diameter = max(
            theme.scaled(theme.marker_min_diameter),
            self.width * theme.marker_width_fraction,
        )
        return 0.5 * diameter

    def draw_marker(self, surface: SvgSurface, t: float, options: RenderOptions) -> None:
        x, y = self.geometry.point_at(t)
        radius = self.marker_radius()
        with surface.scoped():
            surface.fill_style = self.theme.marker_fill
            surface.stroke_style = self.theme.marker_stroke
            surface.line_width = self.theme.scaled(self.theme.marker_stroke_width)
            surface.begin_path()
            surface.ellipse(x, y, radius, radius)
            surface.fill()
            surface.stroke()

    def label_colors(self, t: float) -> tuple[str, str]:
        """Colors for the left and right labels."""
        theme = self.theme
        if not theme.dim_inactive_label:
            return theme.label_color, theme.label_color
        sx = active_quadrant(t)
        left = theme.label_color if 0 <= sx < 0.5 else theme.inactive_label_color
        right = theme.label_color if 0.5 <= sx < 1.0 else theme.inactive_label_color
        return left, right

    def draw_labels(self, surface: SvgSurface, t: float, options: RenderOptions) -> None:
        if not options.show_labels:
            return
        theme, geom = self.theme, self.geometry
        text_size = theme.scaled(theme.label_size)
        baseline = geom.ybase + text_size
        left_x, _ = geom.point_at(QUARTER)
        right_x, _ = geom.point_at(3 * QUARTER)
        left_color, right_color = self.label_colors(t)

        with surface.scoped():
            surface.text_align = "center"
            surface.set_font(text_size, theme.font_family)
            surface.fill_style = left_color
            surface.fill_text(theme.labels[0], left_x, baseline)
            surface.fill_style = right_color
            surface.fill_text(theme.labels[1], right_x, baseline)

    def draw_title(self, surface: SvgSurface, t: float, options: RenderOptions) -> None:
        if not options.has_title:
            return
        theme, geom = self.theme, self.geometry
        title_size = theme.scaled(theme.title_size)
        with surface.scoped():
            surface.text_align = "left"
            surface.set_font(title_size, theme.font_family, weight="bold")
            surface.fill_style = theme.title_color
            surface.fill_text(options.title, geom.inset, geom.inset + title_size * 0.5)


def render(
    t: float,
    fmt: ImageFormat | str | None = ImageFormat.JPG,
    options: RenderOptions | dict | None = None,
    theme: Theme | None = None,
) -> bytes:
    """Render a hill chart for progress ``t`` (clamped to [0, 1]) as image bytes."""
    if not isinstance(options, RenderOptions):
        options = RenderOptions.from_dict(options)
    return HillChartRenderer(theme).render(t, fmt, options)

"""Hill curve geometry — two cubic Bézier segments meeting at the peak.

All functions are pure. Coordinates are canvas pixels with y growing downward,
so the peak has the smallest y and both endpoints sit on the baseline.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

CurvePoint = tuple[float, float]

# Margin and control-point offsets as fractions of canvas width.
_INSET_FRACTION = 0.05
_MID_FRACTION = 0.5
_XOFFSET_FRACTION = 0.2

# Peak height in multiples of the inset. 1.0 hugs the top edge;
# 2.0 leaves headroom for a title.
DEFAULT_YPEAK_FACTOR = 2.0

# Area-under-curve approximation: samples per quarter.
AREA_SAMPLES = 10

QUARTER = 0.25


def bezier_point(a: float, b: float, c: float, d: float, u: float) -> float:
    """Evaluate one coordinate of a cubic Bézier at parameter ``u``.

    ``a`` and ``d`` are the anchor values, ``b`` and ``c`` the control values.
    Call once with x values and once with y values to get a point.
    """
    v = 1 - u
    return v ** 3 * a + 3 * v ** 2 * u * b + 3 * v * u ** 2 * c + u ** 3 * d


@dataclass(frozen=True)
class CurveGeometry:
    """Derived layout constants for a canvas of the given size."""

    width: float
    height: float
    ypeak_factor: float = DEFAULT_YPEAK_FACTOR

    @property
    def inset(self) -> float:
        return self.width * _INSET_FRACTION

    @property
    def mid(self) -> float:
        return self.width * _MID_FRACTION

    @property
    def xoffset(self) -> float:
        return self.width * _XOFFSET_FRACTION

    @property
    def ybase(self) -> float:
        return self.height - self.inset

    @property
    def ypeak(self) -> float:
        return self.inset * self.ypeak_factor

    def point_at(self, t: float) -> CurvePoint:
        """Point on the curve at progress ``t``. ``t`` is not validated."""
        w, mid, xoff = self.width, self.mid, self.xoffset
        ybase, ypeak = self.ybase, self.ypeak

        if t < 0.5:
            u = t * 2
            x = bezier_point(0, xoff, mid - xoff, mid, u)
            y = bezier_point(ybase, ybase, ypeak, ypeak, u)
        else:
            u = (t - 0.5) * 2
            x = bezier_point(mid, mid + xoff, w - xoff, w, u)
            y = bezier_point(ypeak, ypeak, ybase, ybase, u)
        return (x, y)

    def segments(self) -> list[tuple[CurvePoint, CurvePoint, CurvePoint]]:
        """Control/end points of both segments, for path construction.

        Each entry is ``(control1, control2, end)``; the first segment starts
        at ``(0, ybase)``.
        """
        w, mid, xoff = self.width, self.mid, self.xoffset
        ybase, ypeak = self.ybase, self.ypeak
        return [
            ((xoff, ybase), (mid - xoff, ypeak), (mid, ypeak)),
            ((mid + xoff, ypeak), (w - xoff, ybase), (w, ybase)),
        ]


def evaluate_curve(
    width: float,
    height: float,
    t: float,
    ypeak_factor: float = DEFAULT_YPEAK_FACTOR,
) -> CurvePoint:
    """Point on the hill curve for a ``width`` x ``height`` canvas."""
    return CurveGeometry(width, height, ypeak_factor).point_at(t)


def quadrant_boundaries(
    width: float,
    height: float,
    ypeak_factor: float = DEFAULT_YPEAK_FACTOR,
) -> list[tuple[CurvePoint, CurvePoint]]:
    """Divider endpoints at t = 0.25, 0.5, 0.75.

    Returns ``(on_curve, on_base)`` pairs; ``on_base`` shares the x coordinate
    and sits on the baseline.
    """
    geom = CurveGeometry(width, height, ypeak_factor)
    pairs = []
    for t in (QUARTER, 2 * QUARTER, 3 * QUARTER):
        x, y = geom.point_at(t)
        pairs.append(((x, y), (x, geom.ybase)))
    return pairs


def active_quadrant(t: float) -> float:
    """Start of the quarter containing ``t``; 1.0 maps to 1.0."""
    return math.floor(t * 4) * QUARTER


def area_under_curve(
    width: float,
    height: float,
    x1: float,
    x2: float,
    ypeak_factor: float = DEFAULT_YPEAK_FACTOR,
    steps: int = AREA_SAMPLES,
) -> list[CurvePoint]:
    """Closed polygon approximating the area under the curve on [x1, x2].

    ``x1``/``x2`` are curve parameters, not pixels. Samples are taken at
    ``x1 + i * (x2 - x1) / steps`` for ``i < steps``, so the upper bound is
    only reached through the explicit boundary vertex. Vertex order: start
    on the curve, follow it, drop to the baseline at ``x2``, return along
    the baseline to ``x1``.
    """
    geom = CurveGeometry(width, height, ypeak_factor)
    step = (x2 - x1) / steps
    samples = [geom.point_at(x1 + step * i) for i in range(steps)]

    q1x, q1y = geom.point_at(x1)
    q2x, q2y = geom.point_at(x2)

    return [
        (q1x, q1y),
        *samples,
        (q2x, q2y),
        (q2x, geom.ybase),
        (q1x, geom.ybase),
    ]

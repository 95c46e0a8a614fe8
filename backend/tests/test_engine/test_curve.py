"""Tests for the hill curve geometry."""

import pytest

from hillchart.engine.curve import (
    CurveGeometry,
    active_quadrant,
    area_under_curve,
    bezier_point,
    evaluate_curve,
    quadrant_boundaries,
)
from tests.conftest import HEIGHT, WIDTH


def test_bezier_point_anchors():
    assert bezier_point(1, 2, 3, 4, 0) == 1
    assert bezier_point(1, 2, 3, 4, 1) == 4


def test_bezier_point_midway():
    # (a + 3b + 3c + d) / 8
    assert bezier_point(0, 8, 16, 24, 0.5) == pytest.approx(12.0)


def test_geometry_constants():
    geom = CurveGeometry(WIDTH, HEIGHT)
    assert geom.inset == pytest.approx(60)
    assert geom.mid == pytest.approx(600)
    assert geom.xoffset == pytest.approx(240)
    assert geom.ybase == pytest.approx(340)
    assert geom.ypeak == pytest.approx(120)


def test_classic_peak_hugs_top():
    assert CurveGeometry(WIDTH, HEIGHT, ypeak_factor=1.0).ypeak == pytest.approx(60)


def test_endpoints_on_baseline():
    ybase = CurveGeometry(WIDTH, HEIGHT).ybase
    assert evaluate_curve(WIDTH, HEIGHT, 0) == pytest.approx((0, ybase))
    assert evaluate_curve(WIDTH, HEIGHT, 1) == pytest.approx((WIDTH, ybase))


def test_midpoint_is_peak():
    geom = CurveGeometry(WIDTH, HEIGHT)
    assert evaluate_curve(WIDTH, HEIGHT, 0.5) == (geom.mid, geom.ypeak)


def test_single_peak():
    y = {t: evaluate_curve(WIDTH, HEIGHT, t)[1] for t in (0.1, 0.3, 0.5, 0.7, 0.9)}
    assert y[0.1] > y[0.3] > y[0.5]
    assert y[0.5] < y[0.7] < y[0.9]


def test_y_monotonic_on_each_half():
    ts = [i / 100 for i in range(101)]
    ys = [evaluate_curve(WIDTH, HEIGHT, t)[1] for t in ts]
    rising, falling = ys[:51], ys[50:]
    assert all(a >= b for a, b in zip(rising, rising[1:]))
    assert all(a <= b for a, b in zip(falling, falling[1:]))


def test_x_increases_left_to_right():
    xs = [evaluate_curve(WIDTH, HEIGHT, i / 20)[0] for i in range(21)]
    assert xs == sorted(xs)


def test_curve_is_symmetric():
    for t in (0.1, 0.25, 0.4):
        lx, ly = evaluate_curve(WIDTH, HEIGHT, t)
        rx, ry = evaluate_curve(WIDTH, HEIGHT, 1 - t)
        assert lx == pytest.approx(WIDTH - rx)
        assert ly == pytest.approx(ry)


def test_quadrant_boundaries():
    pairs = quadrant_boundaries(WIDTH, HEIGHT)
    assert len(pairs) == 3
    for t, (top, bottom) in zip((0.25, 0.5, 0.75), pairs):
        assert top == pytest.approx(evaluate_curve(WIDTH, HEIGHT, t))
        assert bottom[0] == top[0]
        assert bottom[1] == pytest.approx(340)


@pytest.mark.parametrize(
    "t,expected",
    [(0.0, 0.0), (0.1, 0.0), (0.25, 0.25), (0.35, 0.25), (0.5, 0.5), (0.99, 0.75), (1.0, 1.0)],
)
def test_active_quadrant(t, expected):
    assert active_quadrant(t) == expected


def test_area_under_curve_vertex_order():
    poly = area_under_curve(WIDTH, HEIGHT, 0.25, 0.5)
    # start + 10 samples + upper boundary + two baseline corners
    assert len(poly) == 14
    start = evaluate_curve(WIDTH, HEIGHT, 0.25)
    end = evaluate_curve(WIDTH, HEIGHT, 0.5)
    assert poly[0] == pytest.approx(start)
    assert poly[11] == pytest.approx(end)
    assert poly[12] == pytest.approx((end[0], 340))
    assert poly[13] == pytest.approx((start[0], 340))


def test_area_sampling_stops_short_of_upper_bound():
    poly = area_under_curve(WIDTH, HEIGHT, 0.0, 0.25)
    samples = poly[1:11]
    assert samples[0] == pytest.approx(evaluate_curve(WIDTH, HEIGHT, 0.0))
    assert samples[-1] == pytest.approx(evaluate_curve(WIDTH, HEIGHT, 0.225))
    upper = evaluate_curve(WIDTH, HEIGHT, 0.25)
    assert all(s != pytest.approx(upper) for s in samples)

"""Tests for the SVG drawing surface."""

import xml.etree.ElementTree as ET

import pytest

from hillchart import render
from hillchart.svg.surface import SvgSurface

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_rejects_empty_canvas():
    with pytest.raises(ValueError):
        SvgSurface(0, 100)


def test_restore_without_save():
    surface = SvgSurface(10, 10)
    with pytest.raises(RuntimeError):
        surface.restore()


def test_save_restore_round_trip():
    surface = SvgSurface(10, 10)
    surface.fill_style = "#111111"
    surface.save()
    surface.fill_style = "#222222"
    surface.set_line_dash([4, 4])
    surface.restore()
    assert surface.fill_style == "#111111"
    assert surface.state.line_dash == ()


def test_scoped_restores_on_error():
    surface = SvgSurface(10, 10)
    surface.line_width = 1
    with pytest.raises(KeyError):
        with surface.scoped():
            surface.line_width = 7
            raise KeyError("boom")
    assert surface.line_width == 1
    assert surface.depth == 0


def test_nested_scopes():
    surface = SvgSurface(10, 10)
    with surface.scoped():
        surface.stroke_style = "#AAAAAA"
        with surface.scoped():
            surface.stroke_style = "#BBBBBB"
            assert surface.depth == 2
        assert surface.stroke_style == "#AAAAAA"
    assert surface.stroke_style == "#000000"


def test_path_is_not_style_state():
    surface = SvgSurface(10, 10)
    surface.begin_path()
    surface.move_to(0, 0)
    with surface.scoped():
        surface.line_to(5, 5)
    surface.stroke()
    assert 'd="M 0,0 L 5,5"' in surface.elements[0]


def test_empty_path_draws_nothing():
    surface = SvgSurface(10, 10)
    surface.begin_path()
    surface.fill()
    surface.stroke()
    assert surface.elements == []


def test_stroke_carries_dash_and_width():
    surface = SvgSurface(10, 10)
    surface.stroke_style = "#AAAAAA"
    surface.line_width = 2
    surface.set_line_dash([1.5, 1.5])
    surface.begin_path()
    surface.move_to(1, 1)
    surface.line_to(2, 2)
    surface.stroke()
    el = surface.elements[0]
    assert 'stroke="#AAAAAA"' in el
    assert 'stroke-width="2"' in el
    assert 'stroke-dasharray="1.5 1.5"' in el
    assert 'fill="none"' in el


def test_bezier_and_close():
    surface = SvgSurface(10, 10)
    surface.begin_path()
    surface.move_to(0, 10)
    surface.bezier_curve_to(1, 10, 4, 0, 5, 0)
    surface.close_path()
    surface.fill()
    assert 'd="M 0,10 C 1,10 4,0 5,0 Z"' in surface.elements[0]


def test_text_is_escaped_and_aligned():
    surface = SvgSurface(100, 100)
    surface.text_align = "center"
    surface.set_font(24, "sans-serif", weight="bold")
    surface.fill_text('Q3 <R&D> "plan"', 50, 50)
    el = surface.elements[0]
    assert "&lt;R&amp;D&gt;" in el
    assert 'text-anchor="middle"' in el
    assert 'font-weight="bold"' in el
    assert 'font-size="24"' in el


def test_unknown_text_align():
    with pytest.raises(ValueError):
        SvgSurface(10, 10).text_align = "justify"


def test_to_svg_is_well_formed():
    surface = SvgSurface(300, 100)
    surface.fill_rect(0, 0, 300, 100)
    surface.begin_path()
    surface.ellipse(50, 50, 10, 10)
    surface.fill()
    surface.fill_text("a & b", 10, 10)

    markup = surface.to_svg()
    assert markup.startswith('<?xml version="1.0" encoding="UTF-8"?>')

    root = ET.fromstring(markup.encode("utf-8"))
    assert root.tag == f"{SVG_NS}svg"
    assert root.get("width") == "300"
    assert root.get("viewBox") == "0 0 300 100"
    tags = [child.tag for child in root]
    assert tags == [f"{SVG_NS}rect", f"{SVG_NS}path", f"{SVG_NS}text"]


def test_text_drops_xml_illegal_characters():
    surface = SvgSurface(100, 100)
    surface.fill_text("Sprint\x0b3\x01 <ok>", 10, 10)
    assert ">Sprint3 &lt;ok&gt;</text>" in surface.elements[0]


@pytest.mark.parametrize("title", ["a\x0bb", "Sprint\x0b3", "\x00\x1f"])
def test_rendered_svg_with_control_characters_is_well_formed(title):
    root = ET.fromstring(render(0.5, "svg", {"title": title}))
    assert root.tag == f"{SVG_NS}svg"

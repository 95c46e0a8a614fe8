"""Canvas-style drawing surface that records SVG markup.

Mirrors the small subset of an HTML canvas 2D context the chart needs:
path construction, fill/stroke, text and a save/restore style stack. Every
operation maps onto an SVG element, so the same drawing can be serialized
as a vector document or rasterized by the encoder.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from xml.sax.saxutils import escape, quoteattr

from hillchart.models.options import strip_control_chars

_TEXT_ANCHORS = {"left": "start", "start": "start", "center": "middle", "right": "end", "end": "end"}


def _fmt(value: float) -> str:
    """Compact fixed-point number for path data."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass
class StyleState:
    fill_style: str = "#000000"
    stroke_style: str = "#000000"
    line_width: float = 1.0
    line_dash: tuple[float, ...] = field(default_factory=tuple)
    font_size: float = 10.0
    font_family: str = "sans-serif"
    font_weight: str = "normal"
    text_align: str = "start"


class SvgSurface:
    """Stateful 2D context. One instance per rendered image."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._state = StyleState()
        self._stack: list[StyleState] = []
        self._path: list[str] = []
        self._elements: list[str] = []

    # ── Style state ──

    @property
    def fill_style(self) -> str:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._state.fill_style = value

    @property
    def stroke_style(self) -> str:
        return self._state.stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self._state.stroke_style = value

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        self._state.line_width = value

    @property
    def text_align(self) -> str:
        return self._state.text_align

    @text_align.setter
    def text_align(self, value: str) -> None:
        if value not in _TEXT_ANCHORS:
            raise ValueError(f"Unknown text alignment: {value!r}")
        self._state.text_align = value

    @property
    def state(self) -> StyleState:
        """Copy of the current style state."""
        return replace(self._state)

    def set_line_dash(self, segments: list[float] | tuple[float, ...]) -> None:
        self._state.line_dash = tuple(segments)

    def set_font(self, size: float, family: str = "sans-serif", weight: str = "normal") -> None:
        self._state.font_size = size
        self._state.font_family = family
        self._state.font_weight = weight

    def save(self) -> None:
        self._stack.append(replace(self._state))

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self._state = self._stack.pop()

    @contextmanager
    def scoped(self) -> Iterator[SvgSurface]:
        """save() on entry, restore() on every exit path."""
        self.save()
        try:
            yield self
        finally:
            self.restore()

    @property
    def depth(self) -> int:
        return len(self._stack)

    # ── Paths ──

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path.append(f"M {_fmt(x)},{_fmt(y)}")

    def line_to(self, x: float, y: float) -> None:
        self._path.append(f"L {_fmt(x)},{_fmt(y)}")

    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        self._path.append(
            f"C {_fmt(cp1x)},{_fmt(cp1y)} {_fmt(cp2x)},{_fmt(cp2y)} {_fmt(x)},{_fmt(y)}"
        )

    def ellipse(self, x: float, y: float, rx: float, ry: float) -> None:
        """Full ellipse as a closed subpath (two half arcs)."""
        self._path.append(
            f"M {_fmt(x + rx)},{_fmt(y)} "
            f"A {_fmt(rx)},{_fmt(ry)} 0 1 0 {_fmt(x - rx)},{_fmt(y)} "
            f"A {_fmt(rx)},{_fmt(ry)} 0 1 0 {_fmt(x + rx)},{_fmt(y)} Z"
        )

    def close_path(self) -> None:
        self._path.append("Z")

    def fill(self) -> None:
        if not self._path:
            return
        self._elements.append(
            f'<path d="{" ".join(self._path)}" fill="{self._state.fill_style}" stroke="none"/>'
        )

    def stroke(self) -> None:
        if not self._path:
            return
        s = self._state
        attrs = (
            f'fill="none" stroke="{s.stroke_style}" stroke-width="{_fmt(s.line_width)}"'
        )
        if s.line_dash:
            attrs += f' stroke-dasharray="{" ".join(_fmt(v) for v in s.line_dash)}"'
        self._elements.append(f'<path d="{" ".join(self._path)}" {attrs}/>')

    # ── Shapes and text ──

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._elements.append(
            f'<rect x="{_fmt(x)}" y="{_fmt(y)}" width="{_fmt(w)}" height="{_fmt(h)}"'
            f' fill="{self._state.fill_style}"/>'
        )

    def fill_text(self, text: str, x: float, y: float) -> None:
        s = self._state
        self._elements.append(
            f'<text x="{_fmt(x)}" y="{_fmt(y)}" fill="{s.fill_style}"'
            f" font-family={quoteattr(s.font_family)} font-size=\"{_fmt(s.font_size)}\""
            f' font-weight="{s.font_weight}" text-anchor="{_TEXT_ANCHORS[s.text_align]}">'
            f"{escape(strip_control_chars(text))}</text>"
        )

    # ── Output ──

    @property
    def elements(self) -> list[str]:
        return list(self._elements)

    def to_svg(self) -> str:
        w, h = self.width, self.height
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}"'
            f' viewBox="0 0 {w} {h}">',
        ]
        lines.extend(f"  {el}" for el in self._elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

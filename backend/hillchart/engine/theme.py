"""Chart theme — every style constant the renderer reads."""

from __future__ import annotations

from dataclasses import dataclass

from hillchart.engine.curve import DEFAULT_YPEAK_FACTOR

# Canvas is always three times wider than it is tall.
ASPECT_RATIO = 3


@dataclass(frozen=True)
class CanvasDimensions:
    width: int
    height: int

    @classmethod
    def for_height(cls, height: int) -> CanvasDimensions:
        return cls(width=height * ASPECT_RATIO, height=height)


@dataclass(frozen=True)
class Theme:
    """Immutable palette and layout, injected into the renderer."""

    # Supersampling multiplier applied to every linear dimension
    pixel_density: int = 2
    base_height: int = 200

    # Colors
    background: str = "#FFFFFF"
    hill_fill: str = "#F8F4DA"
    curve_color: str = "#333333"
    divider_color: str = "#AAAAAA"
    marker_fill: str = "#F802C1"
    marker_stroke: str = "#FFFFFF"
    label_color: str = "#333333"
    inactive_label_color: str = "#AAAAAA"
    title_color: str = "#333333"

    # Strokes (unscaled)
    curve_width: float = 2.0
    divider_width: float = 0.5
    marker_stroke_width: float = 1.0
    # Dash and gap length as a fraction of the canvas inset
    divider_dash_factor: float = 0.5

    # Marker diameter: max(min_diameter * density, width * fraction)
    marker_min_diameter: float = 8.0
    marker_width_fraction: float = 0.025

    # Text (unscaled px)
    font_family: str = "sans-serif"
    label_size: float = 12.0
    title_size: float = 16.0
    labels: tuple[str, str] = ("Figuring things out", "Making it happen")

    ypeak_factor: float = DEFAULT_YPEAK_FACTOR

    # Dim the label of the half that does not hold the marker
    dim_inactive_label: bool = False

    def __post_init__(self) -> None:
        if self.pixel_density <= 0 or self.base_height <= 0:
            raise ValueError(
                f"Canvas size must be positive "
                f"(pixel_density={self.pixel_density}, base_height={self.base_height})"
            )

    @property
    def dimensions(self) -> CanvasDimensions:
        return CanvasDimensions.for_height(self.base_height * self.pixel_density)

    def scaled(self, value: float) -> float:
        return value * self.pixel_density


DEFAULT_THEME = Theme()

# The first hill chart: peak close to the top edge, no title room,
# inactive label dimmed.
CLASSIC_THEME = Theme(
    curve_color="#000000",
    ypeak_factor=1.0,
    dim_inactive_label=True,
)

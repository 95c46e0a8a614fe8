"""Serialize a composed surface to SVG, PNG or JPEG bytes.

PNG goes through CairoSVG; JPEG re-encodes that PNG with Pillow.
"""

from __future__ import annotations

import io
import logging

import cairosvg
from PIL import Image

from hillchart.models.options import ImageFormat
from hillchart.svg.surface import SvgSurface

logger = logging.getLogger(__name__)

JPEG_QUALITY = 85
# Pillow subsampling code 2 = 4:2:0
JPEG_SUBSAMPLING = 2


def encode_svg(surface: SvgSurface) -> bytes:
    return surface.to_svg().encode("utf-8")


def encode_png(surface: SvgSurface) -> bytes:
    return cairosvg.svg2png(
        bytestring=encode_svg(surface),
        output_width=surface.width,
        output_height=surface.height,
    )


def encode_jpeg(surface: SvgSurface) -> bytes:
    png_data = encode_png(surface)
    with Image.open(io.BytesIO(png_data)) as img:
        rgb = img.convert("RGB")
    buf = io.BytesIO()
    rgb.save(
        buf,
        format="JPEG",
        quality=JPEG_QUALITY,
        progressive=True,
        subsampling=JPEG_SUBSAMPLING,
    )
    return buf.getvalue()


_ENCODERS = {
    ImageFormat.SVG: encode_svg,
    ImageFormat.PNG: encode_png,
    ImageFormat.JPG: encode_jpeg,
}


def encode(surface: SvgSurface, fmt: ImageFormat) -> bytes:
    """Encode ``surface`` in ``fmt``."""
    data = _ENCODERS[fmt](surface)
    logger.debug("Encoded %dx%d %s (%d bytes)", surface.width, surface.height, fmt.value, len(data))
    return data

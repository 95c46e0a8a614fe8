"""GET /v2/{t}/... — hill chart images.

``t`` is an integer percentage. Out-of-range values are clamped; values that
are not numbers at all get a 422.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response

from hillchart.config import Settings
from hillchart.dependencies import get_renderer, get_settings
from hillchart.engine.renderer import HillChartRenderer
from hillchart.models.options import (
    ImageFormat,
    InvalidProgressError,
    RenderOptions,
    chart_filename,
    clamp_percentage,
    is_truthy_flag,
    parse_percentage,
    strip_control_chars,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v2")


def content_disposition(attachment: bool, filename: str) -> str:
    """Header value; non-ASCII names also get an RFC 5987 ``filename*``."""
    kind = "attachment" if attachment else "inline"
    filename = strip_control_chars(filename)
    safe = filename.replace('"', "")
    if safe.isascii():
        return f'{kind}; filename="{safe}"'
    fallback = safe.encode("ascii", "replace").decode("ascii")
    return f"{kind}; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _chart_response(
    raw_t: str,
    fmt: ImageFormat,
    title: str | None,
    hide_labels: str | None,
    download: str | None,
    renderer: HillChartRenderer,
    settings: Settings,
) -> Response:
    try:
        percent = clamp_percentage(parse_percentage(raw_t))
    except InvalidProgressError as e:
        logger.info("Rejected progress value %r", raw_t)
        raise HTTPException(status_code=422, detail=str(e)) from e

    options = RenderOptions(title=title or None, show_labels=not is_truthy_flag(hide_labels))
    body = renderer.render(percent / 100, fmt, options)

    filename = chart_filename(percent, options.title, fmt)
    return Response(
        content=body,
        media_type=fmt.media_type,
        headers={
            "Content-Disposition": content_disposition(is_truthy_flag(download), filename),
            "Cache-Control": f"public, max-age:{settings.cache_max_age}",
        },
    )


# Declared before the generic route so "hill-chart.png" is not read as a format.
@router.get("/{t}/hill-chart.png")
def hill_chart_png(
    t: str,
    title: str | None = None,
    hideLabels: str | None = None,
    download: str | None = None,
    renderer: HillChartRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> Response:
    return _chart_response(t, ImageFormat.PNG, title, hideLabels, download, renderer, settings)


@router.get("/{t}")
@router.get("/{t}/{image_type}")
def hill_chart(
    t: str,
    image_type: str | None = None,
    title: str | None = None,
    hideLabels: str | None = None,
    download: str | None = None,
    renderer: HillChartRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> Response:
    fmt = ImageFormat.parse(image_type)
    return _chart_response(t, fmt, title, hideLabels, download, renderer, settings)

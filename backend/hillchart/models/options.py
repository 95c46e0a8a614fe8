"""Render options and the permissive normalization of caller input."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

# Leading integer, the way a lenient "parseInt" reads it: "42abc" -> 42.
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_WHITESPACE_RE = re.compile(r"\s+")
# Characters XML 1.0 forbids, plus DEL, which HTTP header values reject.
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_TRUTHY_FLAGS = {"true", "1"}


class InvalidProgressError(ValueError):
    """Progress value that is not a number at all (as opposed to out of range)."""


class ImageFormat(str, enum.Enum):
    PNG = "png"
    JPG = "jpg"
    SVG = "svg"

    @classmethod
    def parse(cls, token: str | None) -> ImageFormat:
        """Case-insensitive lookup; unknown or missing tokens fall back to JPG."""
        if not token:
            return cls.JPG
        token = token.strip().lower()
        if token == "jpeg":
            return cls.JPG
        try:
            return cls(token)
        except ValueError:
            return cls.JPG

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]

    @property
    def extension(self) -> str:
        return self.value


_MEDIA_TYPES = {
    ImageFormat.PNG: "image/png",
    ImageFormat.JPG: "image/jpeg",
    ImageFormat.SVG: "image/svg+xml",
}


@dataclass(frozen=True)
class RenderOptions:
    title: str | None = None
    show_labels: bool = True

    @property
    def has_title(self) -> bool:
        return bool(self.title)

    @classmethod
    def from_dict(cls, options: dict | None) -> RenderOptions:
        """Build from a loose mapping (``showLabels`` or ``show_labels``)."""
        if not options:
            return cls()
        show = options.get("show_labels", options.get("showLabels"))
        if show is None:
            show = True
        return cls(title=options.get("title") or None, show_labels=bool(show))


def clamp_progress(t: float) -> float:
    return min(1.0, max(0.0, float(t)))


def clamp_percentage(percent: int) -> int:
    return min(100, max(0, percent))


def parse_percentage(raw: str) -> int:
    """Read the leading integer of ``raw``; raise if there is none."""
    match = _LEADING_INT_RE.match(raw or "")
    if match is None:
        raise InvalidProgressError("Parameter `t` must be a number")
    return int(match.group(1))


def strip_control_chars(text: str) -> str:
    return _CONTROL_CHARS_RE.sub("", text)


def is_truthy_flag(value: str | None) -> bool:
    """Query flags count as set only for the literal strings "true" and "1"."""
    return value in _TRUTHY_FLAGS


def chart_filename(percent: int, title: str | None, fmt: ImageFormat) -> str:
    """``hill-chart-at-35-My_Title.png``; whitespace runs become underscores."""
    name = f"hill-chart-at-{percent}"
    if title:
        name += "-" + _WHITESPACE_RE.sub("_", title)
    return f"{name}.{fmt.extension}"

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Sequence, Tuple

from .color import CHANNEL_MAX, CHANNEL_MIN, Color

BRIGHTEN_FACTOR = 1.2
DARKEN_FACTOR = 0.8

# Corners of the RYB cube expressed as RGB, indexed by (r, y, b) bits.
_RYB_CORNERS: Tuple[Tuple[int, int, int], ...] = (
    (255, 255, 255),  # white
    (0, 0, 255),  # blue
    (255, 255, 0),  # yellow
    (0, 255, 0),  # green
    (255, 0, 0),  # red
    (128, 0, 128),  # purple
    (255, 128, 0),  # orange
    (0, 0, 0),  # black
)


class GradientMode(Enum):
    BRIGHTEN = "brighten"
    DARKEN = "darken"

    @classmethod
    def from_value(cls, value: object) -> "GradientMode":
        """
        Anything other than ``"darken"`` brightens, which also covers the
        older ``"lighten"`` spelling used by the toolbar.
        """

        if isinstance(value, GradientMode):
            return value
        if str(value).strip().lower() == cls.DARKEN.value:
            return cls.DARKEN
        return cls.BRIGHTEN


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_channel(value: float) -> int:
    return _round_half_up(min(CHANNEL_MAX, max(CHANNEL_MIN, value)))


def _smoothstep(t: float, a: float, b: float) -> float:
    weight = t * t * (3 - 2 * t)
    return a + weight * (b - a)


def _interpolate_channel(r: float, y: float, b: float, channel: int) -> float:
    corners = _RYB_CORNERS
    x0 = _smoothstep(b, corners[0][channel], corners[1][channel])
    x1 = _smoothstep(b, corners[2][channel], corners[3][channel])
    x2 = _smoothstep(b, corners[4][channel], corners[5][channel])
    x3 = _smoothstep(b, corners[6][channel], corners[7][channel])
    y0 = _smoothstep(y, x0, x1)
    y1 = _smoothstep(y, x2, x3)
    return _smoothstep(r, y0, y1)


def ryb_to_rgb(ryb: Sequence[float]) -> Color:
    """
    Map a pigment (RYB) triple onto a display color using trilinear
    interpolation across the RYB cube.
    """

    r = ryb[0] / CHANNEL_MAX
    y = ryb[1] / CHANNEL_MAX
    b = ryb[2] / CHANNEL_MAX
    return Color(
        _clamp_channel(_interpolate_channel(r, y, b, 0)),
        _clamp_channel(_interpolate_channel(r, y, b, 1)),
        _clamp_channel(_interpolate_channel(r, y, b, 2)),
    )


def rgb_to_ryb(color: Color) -> Tuple[int, int, int]:
    """
    Approximate the pigment (RYB) composition of a display color.
    """

    red, green, blue = color.as_tuple()

    white = min(red, green, blue)
    red -= white
    green -= white
    blue -= white

    max_green = max(red, green, blue)

    yellow = min(red, green)
    red -= yellow
    green -= yellow

    if blue > 0 and green > 0:
        blue //= 2
        green //= 2

    yellow += green
    blue += green

    max_ryb = max(red, yellow, blue)
    if max_ryb > 0:
        factor = max_green / max_ryb
        red = _round_half_up(red * factor)
        yellow = _round_half_up(yellow * factor)
        blue = _round_half_up(blue * factor)

    return red + white, yellow + white, blue + white


def mix_colors(first: Color, second: Color) -> Color:
    """
    Mix two colors the way paint mixes: average them in RYB space and map the
    result back to RGB. Blue and yellow make green, not grey.
    """

    ryb_first = rgb_to_ryb(first)
    ryb_second = rgb_to_ryb(second)
    mixed = tuple(
        _round_half_up((a + b) / 2) for a, b in zip(ryb_first, ryb_second)
    )
    return ryb_to_rgb(mixed)


def adjust_color(
    color: Optional[Color],
    mode: GradientMode,
    factor: Optional[float] = None,
) -> Optional[Color]:
    if color is None:
        return None
    if factor is None:
        factor = DARKEN_FACTOR if mode is GradientMode.DARKEN else BRIGHTEN_FACTOR
    return Color(*(_clamp_channel(value * factor) for value in color.as_tuple()))

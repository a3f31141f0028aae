"""
Color interpolation along three metrics.

- ``lerp``: encoded sRGB, fast but perceptually uneven
- ``lerp_linear``: linear light, physically correct mixing
- ``lerp_oklch``: perceptual, hue travels the shortest arc
"""
from typing import Callable, Dict

from ..colors.color import Color
from ..conversions.linear import from_linear, into_linear
from ..conversions.oklab import from_oklch, into_oklch
from ..types.constants import CHANNEL_MAX, OKLCH_ACHROMATIC_EPSILON
from ..types.modes import InterpolationSpace
from ..utils import clamp01, quantize_unit
from .hue import lerp_hue


def _mix(x: float, y: float, t: float) -> float:
    return x + (y - x) * t


def lerp(a: Color, b: Color, t: float) -> Color:
    """Per-channel interpolation of the encoded 8-bit values."""
    t = clamp01(t)
    return Color(*(_mix(x, y, t) for x, y in zip(a, b)))


def lerp_linear(a: Color, b: Color, t: float) -> Color:
    """Interpolate all four channels in linear light."""
    t = clamp01(t)
    return from_linear(tuple(_mix(x, y, t) for x, y in zip(into_linear(a), into_linear(b))))


def lerp_oklch(a: Color, b: Color, t: float) -> Color:
    """
    Interpolate in OKLCH along the shortest hue arc.

    A near-gray endpoint has no meaningful hue, so it borrows the hue of the
    other endpoint. Alpha is interpolated straight (not premultiplied).
    """
    t = clamp01(t)
    l1, c1, h1 = into_oklch(a)
    l2, c2, h2 = into_oklch(b)

    if c1 < OKLCH_ACHROMATIC_EPSILON:
        h1 = h2
    elif c2 < OKLCH_ACHROMATIC_EPSILON:
        h2 = h1

    l = _mix(l1, l2, t)
    c = max(_mix(c1, c2, t), 0.0)
    h = lerp_hue(h1, h2, t)
    alpha = _mix(a.a / CHANNEL_MAX, b.a / CHANNEL_MAX, t)

    return from_oklch((l, c, h)).with_alpha(quantize_unit(alpha))


INTERPOLATORS: Dict[InterpolationSpace, Callable[[Color, Color, float], Color]] = {
    InterpolationSpace.SRGB: lerp,
    InterpolationSpace.LINEAR: lerp_linear,
    InterpolationSpace.OKLCH: lerp_oklch,
}


def mix(a: Color, b: Color, t: float, space: InterpolationSpace = InterpolationSpace.OKLCH) -> Color:
    """
    Interpolate between two colors in the chosen space.

    Args:
        a: Start color (returned at ``t=0``)
        b: End color (returned at ``t=1``)
        t: Interpolation factor, clamped to [0, 1]
        space: ``"srgb"``, ``"linear"`` or ``"oklch"``

    Returns:
        The interpolated color
    """
    return INTERPOLATORS[InterpolationSpace(space)](a, b, t)

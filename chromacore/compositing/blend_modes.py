"""
Blend-mode functions.

Each mode maps an unpremultiplied linear backdrop triple and source triple to
the blended triple. Separable modes apply one channel function to R, G and B
independently.
"""
import math
from typing import Callable, Dict

from ..types.color_types import Triple
from ..types.modes import BlendMode
from .nonseparable import blend_color, blend_hue, blend_luminosity, blend_saturation

ChannelFunction = Callable[[float, float], float]
TripleFunction = Callable[[Triple, Triple], Triple]

## Separable channel functions (b = backdrop, s = source)

def normal(b: float, s: float) -> float:
    return s


def multiply(b: float, s: float) -> float:
    return b * s


def screen(b: float, s: float) -> float:
    return b + s - b * s


def hard_light(b: float, s: float) -> float:
    if s <= 0.5:
        return 2.0 * b * s
    return 1.0 - 2.0 * (1.0 - b) * (1.0 - s)


def overlay(b: float, s: float) -> float:
    # HardLight with backdrop and source swapped
    return hard_light(s, b)


def darken(b: float, s: float) -> float:
    return min(b, s)


def lighten(b: float, s: float) -> float:
    return max(b, s)


def color_dodge(b: float, s: float) -> float:
    if b == 0.0:
        return 0.0
    if s == 1.0:
        return 1.0
    return min(1.0, b / (1.0 - s))


def color_burn(b: float, s: float) -> float:
    if b == 1.0:
        return 1.0
    if s == 0.0:
        return 0.0
    return 1.0 - min(1.0, (1.0 - b) / s)


def soft_light(b: float, s: float) -> float:
    if s <= 0.5:
        return b - (1.0 - 2.0 * s) * b * (1.0 - b)
    if b <= 0.25:
        d = ((16.0 * b - 12.0) * b + 4.0) * b
    else:
        d = math.sqrt(b)
    return b + (2.0 * s - 1.0) * (d - b)


def difference(b: float, s: float) -> float:
    return abs(b - s)


def exclusion(b: float, s: float) -> float:
    return b + s - 2.0 * b * s


def separable(fn: ChannelFunction) -> TripleFunction:
    """Lift a channel function to RGB triples."""
    def blend(backdrop: Triple, source: Triple) -> Triple:
        return tuple(fn(b, s) for b, s in zip(backdrop, source))
    blend.__name__ = fn.__name__
    return blend


SEPARABLE_FUNCTIONS: Dict[BlendMode, ChannelFunction] = {
    BlendMode.NORMAL: normal,
    BlendMode.MULTIPLY: multiply,
    BlendMode.SCREEN: screen,
    BlendMode.OVERLAY: overlay,
    BlendMode.DARKEN: darken,
    BlendMode.LIGHTEN: lighten,
    BlendMode.COLOR_DODGE: color_dodge,
    BlendMode.COLOR_BURN: color_burn,
    BlendMode.HARD_LIGHT: hard_light,
    BlendMode.SOFT_LIGHT: soft_light,
    BlendMode.DIFFERENCE: difference,
    BlendMode.EXCLUSION: exclusion,
}

BLEND_FUNCTIONS: Dict[BlendMode, TripleFunction] = {
    **{mode: separable(fn) for mode, fn in SEPARABLE_FUNCTIONS.items()},
    BlendMode.HUE: blend_hue,
    BlendMode.SATURATION: blend_saturation,
    BlendMode.COLOR: blend_color,
    BlendMode.LUMINOSITY: blend_luminosity,
}


def blend_channels(mode: BlendMode, backdrop: Triple, source: Triple) -> Triple:
    """
    Apply a blend mode to linear RGB triples.

    Args:
        mode: Blend mode (a ``BlendMode`` or its CSS keyword)
        backdrop: Unpremultiplied linear backdrop color
        source: Unpremultiplied linear source color

    Returns:
        Blended linear triple (not yet composited with alpha)
    """
    return BLEND_FUNCTIONS[BlendMode(mode)](backdrop, source)

"""
Helpers for the non-separable blend modes.

Follows https://www.w3.org/TR/compositing-1/#blendingnonseparable. All
functions take and return linear RGB triples.
"""
from ..types.color_types import Triple
from ..types.constants import BLEND_LUM_WEIGHTS


def lum(c: Triple) -> float:
    r, g, b = c
    wr, wg, wb = BLEND_LUM_WEIGHTS
    return wr * r + wg * g + wb * b


def sat(c: Triple) -> float:
    return max(c) - min(c)


def clip_color(c: Triple) -> Triple:
    """Pull out-of-range channels back into [0, 1] while preserving ``lum``."""
    l = lum(c)
    n = min(c)
    x = max(c)
    if n < 0.0 and l > n:
        return tuple(l + (v - l) * l / (l - n) for v in c)
    elif x > 1.0 and x > l:
        return tuple(l + (v - l) * (1.0 - l) / (x - l) for v in c)
    return c


def set_lum(c: Triple, l: float) -> Triple:
    d = l - lum(c)
    r, g, b = c
    return clip_color((r + d, g + d, b + d))


def _rank_channels(c: Triple):
    """Indices of (max, mid, min); ties favour red, then green, then blue."""
    r, g, b = c
    if r >= g and r >= b:
        return (0, 2, 1) if g <= b else (0, 1, 2)
    elif g >= r and g >= b:
        return (1, 2, 0) if r <= b else (1, 0, 2)
    else:
        return (2, 1, 0) if r <= g else (2, 0, 1)


def set_sat(c: Triple, s: float) -> Triple:
    """Rescale ``c`` around its minimum so that ``sat(result) == s``."""
    i_max, i_mid, i_min = _rank_channels(c)
    c_max, c_mid, c_min = c[i_max], c[i_mid], c[i_min]

    out = [0.0, 0.0, 0.0]
    chroma = c_max - c_min
    if chroma > 0.0:
        out[i_mid] = (c_mid - c_min) * s / chroma
        out[i_max] = s
    return tuple(out)

## Non-separable blend functions (backdrop, source) -> result

def blend_hue(backdrop: Triple, source: Triple) -> Triple:
    return set_lum(set_sat(source, sat(backdrop)), lum(backdrop))


def blend_saturation(backdrop: Triple, source: Triple) -> Triple:
    return set_lum(set_sat(backdrop, sat(source)), lum(backdrop))


def blend_color(backdrop: Triple, source: Triple) -> Triple:
    return set_lum(source, lum(backdrop))


def blend_luminosity(backdrop: Triple, source: Triple) -> Triple:
    return set_lum(backdrop, lum(source))

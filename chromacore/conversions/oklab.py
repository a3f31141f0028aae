"""
OKLab and OKLCH conversions.

Matrices are the published ones from Björn Ottosson,
https://bottosson.github.io/posts/oklab/ (linear sRGB, D65).
"""
import logging
import math

import numpy as np

from ..colors.color import Color
from ..types.color_types import OKLab, OKLCH, Triple
from ..types.constants import GAMUT_SEARCH_ITERATIONS
from .hsl import normalize_hue
from .linear import from_linear, into_linear

logger = logging.getLogger(__name__)

# linear sRGB -> LMS
LINEAR_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# cube-rooted LMS -> Lab
LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# Lab -> cube-rooted LMS
OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

# LMS -> linear sRGB
LMS_TO_LINEAR = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])


def linear_rgb_to_oklab(rgb: Triple) -> OKLab:
    lms = LINEAR_TO_LMS @ np.asarray(rgb, dtype=np.float64)
    L, a, b = LMS_TO_OKLAB @ np.cbrt(lms)
    return float(L), float(a), float(b)


def oklab_to_linear_rgb(lab: OKLab) -> Triple:
    lms_ = OKLAB_TO_LMS @ np.asarray(lab, dtype=np.float64)
    r, g, b = LMS_TO_LINEAR @ (lms_ ** 3)
    return float(r), float(g), float(b)


def oklab_to_oklch(lab: OKLab) -> OKLCH:
    L, a, b = lab
    c = math.hypot(a, b)
    h = normalize_hue(math.degrees(math.atan2(b, a)))
    return L, c, h


def oklch_to_oklab(lch: OKLCH) -> OKLab:
    L, c, h = lch
    rad = math.radians(h)
    return L, c * math.cos(rad), c * math.sin(rad)


def in_gamut(rgb: Triple) -> bool:
    """True when every linear channel lies in the unit cube."""
    return all(0.0 <= v <= 1.0 for v in rgb)

## Color-level API

def into_oklab(color: Color) -> OKLab:
    r, g, b, _ = into_linear(color)
    return linear_rgb_to_oklab((r, g, b))


def from_oklab(lab: OKLab) -> Color:
    """Build an opaque color from OKLab; out-of-gamut channels are clamped."""
    r, g, b = oklab_to_linear_rgb(lab)
    return from_linear((r, g, b, 1.0))


def into_oklch(color: Color) -> OKLCH:
    return oklab_to_oklch(into_oklab(color))


def gamut_map_chroma(lch: OKLCH) -> float:
    """
    Largest chroma at or below the requested one that stays inside sRGB.

    Lightness and hue are held fixed; chroma is bisected over [0, C]. This is
    plain chroma reduction: monotonic and cheap, not perceptually optimal.
    """
    L, c, h = lch
    c = max(c, 0.0)
    if in_gamut(oklab_to_linear_rgb(oklch_to_oklab((L, c, h)))):
        return c

    lo, hi = 0.0, c
    for _ in range(GAMUT_SEARCH_ITERATIONS):
        mid = 0.5 * (lo + hi)
        if in_gamut(oklab_to_linear_rgb(oklch_to_oklab((L, mid, h)))):
            lo = mid
        else:
            hi = mid

    logger.debug("Gamut mapped OKLCH(%.4f, %.4f, %.2f) to chroma %.6f", L, c, h, lo)
    return lo


def from_oklch(lch: OKLCH) -> Color:
    """Build an opaque color from OKLCH, reducing chroma until it fits sRGB."""
    L, _, h = lch
    c = gamut_map_chroma(lch)
    return from_oklab(oklch_to_oklab((L, c, h)))

import math

from boundednumbers.functions import cyclic_wrap_float

from ..colors.color import Color
from ..types.color_types import HSL, HSLA, Triple
from ..types.constants import CHANNEL_MAX, HSL_CHROMA_EPSILON, HUE_360, PERCENT_MAX
from ..utils import clamp01, quantize_unit


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = float(cyclic_wrap_float(h, 0.0, HUE_360))
    # tiny negatives can wrap up to exactly 360.0
    return 0.0 if h >= HUE_360 else h

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> Triple:
    """
    Convert HSL to RGB using the CSS Color 4 hue-section algorithm.

    Args:
        h: Hue in degrees, any value (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        return m1, m2, low
    elif hue_section == 1:
        return m2, m1, low
    elif hue_section == 2:
        return low, m1, m2
    elif hue_section == 3:
        return low, m2, m1
    elif hue_section == 4:
        return m2, low, m1
    else:
        return m1, low, m2

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    # floating noise must not produce a hue for grays
    if abs(delta) < HSL_CHROMA_EPSILON:
        delta = 0.0

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = delta / (1 - abs(2 * lightness - 1))

    if r == max_c:
        hue = 60 * (((g - b) / delta) % 6)
    elif g == max_c:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)

    return hue, saturation, lightness

## Color-level API (percent scale)

def into_hsl(color: Color) -> HSL:
    """Return ``(hue degrees, saturation %, lightness %)``."""
    r, g, b = (c / CHANNEL_MAX for c in color.into_rgb())
    h, s, l = unit_rgb_to_hsl(r, g, b)
    return h, s * PERCENT_MAX, l * PERCENT_MAX


def into_hsla(color: Color) -> HSLA:
    """Return ``(hue degrees, saturation %, lightness %, alpha [0,1])``."""
    h, s, l = into_hsl(color)
    return h, s, l, color.a / CHANNEL_MAX


def from_hsla(hsla: HSLA) -> Color:
    """Build a color from hue degrees, saturation %, lightness % and alpha [0,1]."""
    h, s, l, alpha = hsla
    r, g, b = hsl_to_unit_rgb(h, clamp01(s / PERCENT_MAX), clamp01(l / PERCENT_MAX))
    return Color(quantize_unit(r), quantize_unit(g), quantize_unit(b), quantize_unit(alpha))


def from_hsl(hsl: HSL) -> Color:
    """Build an opaque color from hue degrees, saturation % and lightness %."""
    h, s, l = hsl
    return from_hsla((h, s, l, 1.0))

"""Accessibility metrics (WCAG 2.x) and lightness adjustments."""
from boundednumbers import clamp

from .colors.color import Color
from .conversions.hsl import from_hsla, into_hsla
from .conversions.linear import from_linear, into_linear
from .types.constants import LUMINANCE_WEIGHTS, PERCENT_MAX
from .utils import clamp01


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance in [0, 1]; alpha is ignored."""
    r, g, b, _ = into_linear(color)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(a: Color, b: Color) -> float:
    """
    WCAG contrast ratio between two colors, from 1 to 21.

    The order of the arguments does not matter. 4.5 is the usual minimum for
    body text, 3 for large text.
    """
    la, lb = relative_luminance(a), relative_luminance(b)
    lighter, darker = (la, lb) if la >= lb else (lb, la)
    return (lighter + 0.05) / (darker + 0.05)


def _shift_hsl_lightness(color: Color, amount: float) -> Color:
    h, s, l, alpha = into_hsla(color)
    l = float(clamp(l + amount * PERCENT_MAX, 0.0, PERCENT_MAX))
    return from_hsla((h, s, l, alpha))


def lighten_hsl(color: Color, amount: float) -> Color:
    """Raise HSL lightness by ``amount`` (a fraction of full lightness)."""
    return _shift_hsl_lightness(color, amount)


def darken_hsl(color: Color, amount: float) -> Color:
    """Lower HSL lightness by ``amount`` (a fraction of full lightness)."""
    return _shift_hsl_lightness(color, -amount)


def _shift_linear(color: Color, amount: float) -> Color:
    r, g, b, alpha = into_linear(color)
    return from_linear((clamp01(r + amount), clamp01(g + amount), clamp01(b + amount), alpha))


def lighten_linear(color: Color, amount: float) -> Color:
    """Add ``amount`` to every linear-light channel."""
    return _shift_linear(color, amount)


def darken_linear(color: Color, amount: float) -> Color:
    """Subtract ``amount`` from every linear-light channel."""
    return _shift_linear(color, -amount)

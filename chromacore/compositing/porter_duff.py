"""Porter-Duff source-over compositing, with and without blend modes."""
from ..colors.color import Color
from ..conversions.linear import from_linear, into_linear
from ..types.constants import CHANNEL_MAX
from ..types.modes import BlendMode
from ..utils import quantize_unit
from .blend_modes import blend_channels


def over(src: Color, backdrop: Color) -> Color:
    """
    Composite ``src`` over ``backdrop`` in linear light.

    Args:
        src: Foreground color
        backdrop: Background color

    Returns:
        The composited color; fully transparent inputs give transparent black.
    """
    sr, sg, sb, sa = into_linear(src)
    br, bg, bb, ba = into_linear(backdrop)

    out_a = sa + ba * (1.0 - sa)
    if out_a <= 0.0:
        return from_linear((0.0, 0.0, 0.0, out_a))

    def channel(s: float, b: float) -> float:
        return (s * sa + b * ba * (1.0 - sa)) / out_a

    return from_linear((channel(sr, br), channel(sg, bg), channel(sb, bb), out_a))


def over_srgb_fast(src: Color, dst: Color) -> Color:
    """
    Porter-Duff over on encoded sRGB values.

    Skips linearization: faster, but darkens mid-tones compared to ``over``.
    A transparent destination adopts the source; a transparent source leaves
    the destination untouched.
    """
    if dst.a == 0:
        return src
    if src.a == 0:
        return dst

    sa = src.a / CHANNEL_MAX
    da = dst.a / CHANNEL_MAX
    out_a = sa + da * (1.0 - sa)

    def channel(sc: int, dc: int) -> int:
        out = (sc / CHANNEL_MAX * sa + dc / CHANNEL_MAX * da * (1.0 - sa)) / out_a
        return quantize_unit(out)

    return Color(
        channel(src.r, dst.r),
        channel(src.g, dst.g),
        channel(src.b, dst.b),
        quantize_unit(out_a),
    )


def blend_over(src: Color, backdrop: Color, mode: BlendMode = BlendMode.NORMAL) -> Color:
    """
    Blend ``src`` onto ``backdrop`` with a W3C blend mode, then composite.

    The blend function sees unpremultiplied linear colors; the result is mixed
    back with the general Porter-Duff formula so that uncovered backdrop and
    source regions keep their own colors.
    """
    mode = BlendMode(mode)
    if src.a == 0:
        return backdrop
    if mode is BlendMode.NORMAL or backdrop.a == 0:
        return over(src, backdrop)

    sr, sg, sb, sa = into_linear(src)
    dr, dg, db, da = into_linear(backdrop)

    blended = blend_channels(mode, (dr, dg, db), (sr, sg, sb))

    out_a = sa + da - sa * da
    if out_a <= 0.0:
        return from_linear((0.0, 0.0, 0.0, 0.0))

    def channel(s: float, d: float, mix: float) -> float:
        premultiplied = d * da * (1.0 - sa) + s * sa * (1.0 - da) + sa * da * mix
        return premultiplied / out_a

    return from_linear((
        channel(sr, dr, blended[0]),
        channel(sg, dg, blended[1]),
        channel(sb, db, blended[2]),
        out_a,
    ))

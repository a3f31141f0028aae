"""
Chromacore Color Space Conversions
==================================

Bidirectional transforms between an 8-bit sRGB ``Color`` and the float
representations used by compositing and interpolation.

Conversion Functions
-------------------

Transfer function:
    decode_srgb(code, use_lut=False) / encode_srgb(linear, use_lut=False)
        Piecewise sRGB gamma, or the lookup-table fast path
    np_decode_srgb(codes) / np_encode_srgb(linear)
        Vectorized reference versions

Linear light:
    into_linear(color) / from_linear((r, g, b, a))

HSL (saturation and lightness as percentages):
    into_hsl(color) / from_hsl((h, s, l))
    into_hsla(color) / from_hsla((h, s, l, a))

OKLab / OKLCH:
    into_oklab(color) / from_oklab((L, a, b))
    into_oklch(color) / from_oklch((L, C, H))
        from_oklch reduces chroma until the color fits sRGB

Examples
--------
>>> from chromacore import Color
>>> from chromacore.conversions import into_oklch, from_oklch
>>> lch = into_oklch(Color(90, 150, 200))
>>> from_oklch(lch)
Color(r=90, g=150, b=200, a=255)
"""

from .transfer import (
    decode_srgb,
    encode_srgb,
    decode_srgb_lut,
    encode_srgb_lut,
    np_decode_srgb,
    np_encode_srgb,
)
from .linear import into_linear, from_linear
from .hsl import (
    into_hsl,
    from_hsl,
    into_hsla,
    from_hsla,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    normalize_hue,
)
from .oklab import (
    into_oklab,
    from_oklab,
    into_oklch,
    from_oklch,
    oklab_to_oklch,
    oklch_to_oklab,
    gamut_map_chroma,
)

__all__ = [
    # transfer
    'decode_srgb',
    'encode_srgb',
    'decode_srgb_lut',
    'encode_srgb_lut',
    'np_decode_srgb',
    'np_encode_srgb',

    # linear
    'into_linear',
    'from_linear',

    # HSL
    'into_hsl',
    'from_hsl',
    'into_hsla',
    'from_hsla',
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'normalize_hue',

    # OKLab / OKLCH
    'into_oklab',
    'from_oklab',
    'into_oklch',
    'from_oklch',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'gamut_map_chroma',
]

"""Bind conversions, compositing, interpolation and parsing onto ``Color``."""
from __future__ import annotations
from ..adjustments import (
    contrast_ratio,
    darken_hsl,
    darken_linear,
    lighten_hsl,
    lighten_linear,
    relative_luminance,
)
from ..compositing import blend_over, over, over_srgb_fast
from ..conversions import (
    from_hsl,
    from_hsla,
    from_linear,
    from_oklab,
    from_oklch,
    into_hsl,
    into_hsla,
    into_linear,
    into_oklab,
    into_oklch,
)
from ..interpolation import lerp, lerp_linear, lerp_oklch, mix
from ..parsing import parse_color
from .color import Color

# color -> intermediate
Color.into_linear = into_linear
Color.into_hsl = into_hsl
Color.into_hsla = into_hsla
Color.into_oklab = into_oklab
Color.into_oklch = into_oklch

# intermediate -> color
Color.from_linear = staticmethod(from_linear)
Color.from_hsl = staticmethod(from_hsl)
Color.from_hsla = staticmethod(from_hsla)
Color.from_oklab = staticmethod(from_oklab)
Color.from_oklch = staticmethod(from_oklch)

# text
Color.parse = staticmethod(parse_color)

# compositing
Color.over = over
Color.over_srgb_fast = over_srgb_fast
Color.blend_over = blend_over

# interpolation
Color.lerp = lerp
Color.lerp_linear = lerp_linear
Color.lerp_oklch = lerp_oklch
Color.mix = mix

# accessibility / adjustments
Color.relative_luminance = relative_luminance
Color.contrast_ratio = contrast_ratio
Color.lighten_hsl = lighten_hsl
Color.darken_hsl = darken_hsl
Color.lighten_linear = lighten_linear
Color.darken_linear = darken_linear

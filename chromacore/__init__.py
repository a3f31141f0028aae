"""Chromacore: an 8-bit sRGB color value with conversions, compositing and CSS parsing."""

from .colors.color import Color
from .types.modes import BlendMode, InterpolationSpace
from .conversions import (
    decode_srgb,
    encode_srgb,
    into_linear,
    from_linear,
    into_hsl,
    from_hsl,
    into_hsla,
    from_hsla,
    into_oklab,
    from_oklab,
    into_oklch,
    from_oklch,
)
from .compositing import over, over_srgb_fast, blend_over, blend_channels
from .interpolation import lerp, lerp_linear, lerp_oklch, mix
from .parsing import (
    parse_color,
    ColorParseError,
    ParseErrorKind,
    EmptyColorError,
    InvalidLengthError,
    InvalidHexError,
    InvalidFuncError,
    OutOfRangeError,
    InvalidTokenError,
)
from .adjustments import (
    relative_luminance,
    contrast_ratio,
    lighten_hsl,
    darken_hsl,
    lighten_linear,
    darken_linear,
)

# Bind the functional API onto Color (after everything above is importable)
from .colors import operations  # noqa: F401

__version__ = "1.0.0"

__all__ = [
    # value type
    "Color",
    "BlendMode",
    "InterpolationSpace",
    # conversions
    "decode_srgb",
    "encode_srgb",
    "into_linear",
    "from_linear",
    "into_hsl",
    "from_hsl",
    "into_hsla",
    "from_hsla",
    "into_oklab",
    "from_oklab",
    "into_oklch",
    "from_oklch",
    # compositing
    "over",
    "over_srgb_fast",
    "blend_over",
    "blend_channels",
    # interpolation
    "lerp",
    "lerp_linear",
    "lerp_oklch",
    "mix",
    # parsing
    "parse_color",
    "ColorParseError",
    "ParseErrorKind",
    "EmptyColorError",
    "InvalidLengthError",
    "InvalidHexError",
    "InvalidFuncError",
    "OutOfRangeError",
    "InvalidTokenError",
    # accessibility / adjustments
    "relative_luminance",
    "contrast_ratio",
    "lighten_hsl",
    "darken_hsl",
    "lighten_linear",
    "darken_linear",
    "__version__",
]

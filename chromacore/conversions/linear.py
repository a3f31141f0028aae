from ..colors.color import Color
from ..types.color_types import LinearRGBA
from ..types.constants import CHANNEL_MAX
from ..utils import quantize_unit
from .transfer import decode_srgb, encode_srgb


def into_linear(color: Color, *, use_lut: bool = False) -> LinearRGBA:
    """
    Decode a color to linear-light RGBA floats.

    Alpha is scaled to [0, 1] directly; it is never gamma-corrected.
    """
    r, g, b, a = color.value
    return (
        decode_srgb(r, use_lut=use_lut),
        decode_srgb(g, use_lut=use_lut),
        decode_srgb(b, use_lut=use_lut),
        a / CHANNEL_MAX,
    )


def from_linear(linear: LinearRGBA, *, use_lut: bool = False) -> Color:
    """
    Encode linear-light RGBA floats to a color.

    Every channel is clamped to [0, 1] before quantization.
    """
    r, g, b, a = linear
    return Color(
        encode_srgb(r, use_lut=use_lut),
        encode_srgb(g, use_lut=use_lut),
        encode_srgb(b, use_lut=use_lut),
        quantize_unit(a),
    )

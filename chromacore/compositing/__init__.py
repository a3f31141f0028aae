"""
Compositing: Porter-Duff "over" and the sixteen W3C blend modes.

>>> from chromacore import Color, BlendMode
>>> from chromacore.compositing import blend_over
>>> blend_over(Color.WHITE, Color(10, 120, 200), BlendMode.MULTIPLY)
Color(r=10, g=120, b=200, a=255)
"""

from .porter_duff import over, over_srgb_fast, blend_over
from .blend_modes import blend_channels, BLEND_FUNCTIONS, SEPARABLE_FUNCTIONS
from .nonseparable import lum, sat, set_lum, set_sat, clip_color
from ..types.modes import BlendMode

__all__ = [
    'over',
    'over_srgb_fast',
    'blend_over',
    'blend_channels',
    'BLEND_FUNCTIONS',
    'SEPARABLE_FUNCTIONS',
    'BlendMode',
    'lum',
    'sat',
    'set_lum',
    'set_sat',
    'clip_color',
]

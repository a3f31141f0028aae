"""
Chromacore Color Value
======================

``Color`` is an immutable 8-bit sRGB color with straight alpha. All other
modules operate on it or produce it.

>>> from chromacore.colors import Color
>>> c = Color(255, 128, 0)
>>> c.value
(255, 128, 0, 255)
>>> semi = c.with_alpha(128)
>>> str(semi)
'#FF800080'
>>> Color.from_rgb((1, 2, 3)).into_rgba()
(1, 2, 3, 255)

Notes
-----
- Channels are clamped to [0, 255] on construction; floats are rounded half-up
- Conversion, compositing and interpolation methods are bound onto ``Color``
  by ``chromacore.colors.operations`` when ``chromacore`` is imported
"""

from .color import Color, to_channel

__all__ = ['Color', 'to_channel']

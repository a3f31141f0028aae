from __future__ import annotations
from typing import Sequence, Tuple, Union

Scalar = Union[int, float]
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
ChannelSequence = Sequence[Scalar]

# Float triples/quads produced by the converters
Triple = Tuple[float, float, float]
LinearRGBA = Tuple[float, float, float, float]
HSL = Triple          # hue degrees, saturation %, lightness %
HSLA = Tuple[float, float, float, float]
OKLab = Triple        # L, a, b
OKLCH = Triple        # L, C, H degrees

from .lerp import lerp, lerp_linear, lerp_oklch, mix, INTERPOLATORS
from .hue import lerp_hue, shortest_hue_delta
from ..types.modes import InterpolationSpace

__all__ = [
    'lerp',
    'lerp_linear',
    'lerp_oklch',
    'mix',
    'INTERPOLATORS',
    'InterpolationSpace',
    'lerp_hue',
    'shortest_hue_delta',
]

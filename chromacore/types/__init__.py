from .modes import BlendMode, InterpolationSpace, NON_SEPARABLE_MODES

__all__ = ["BlendMode", "InterpolationSpace", "NON_SEPARABLE_MODES"]

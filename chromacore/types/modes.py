# No dependencies
from enum import Enum


class BlendMode(str, Enum):
    """W3C compositing blend modes, valued by their CSS ``mix-blend-mode`` keyword."""

    # separable
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color-dodge"
    COLOR_BURN = "color-burn"
    HARD_LIGHT = "hard-light"
    SOFT_LIGHT = "soft-light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"
    # non-separable
    HUE = "hue"
    SATURATION = "saturation"
    COLOR = "color"
    LUMINOSITY = "luminosity"

    @property
    def is_separable(self) -> bool:
        return self not in NON_SEPARABLE_MODES


NON_SEPARABLE_MODES = frozenset({
    BlendMode.HUE,
    BlendMode.SATURATION,
    BlendMode.COLOR,
    BlendMode.LUMINOSITY,
})


class InterpolationSpace(str, Enum):
    SRGB = "srgb"
    LINEAR = "linear"
    OKLCH = "oklch"

import math
from typing import Any
from collections.abc import Sized

from boundednumbers import clamp


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def clamp01(value: float) -> float:
    return float(clamp(value, 0.0, 1.0))


def quantize_unit(value: float, maximum: int = 255) -> int:
    """Map a unit float to ``[0, maximum]`` with clamping and round-half-up."""
    return round_half_up(clamp01(value) * maximum)

"""
sRGB transfer function (gamma encode/decode).

Two interchangeable strategies share one contract:

- the reference piecewise formula (``decode_srgb`` / ``encode_srgb``), and
- a lookup-table fast path (``decode_srgb_lut`` / ``encode_srgb_lut``) whose
  tables are built lazily from the vectorized reference.

Pass ``use_lut=True`` to the public functions to pick the table strategy.
"""
import logging
import math
from typing import Optional

import numpy as np
from numpy import ndarray as NDArray

from ..types.constants import (
    CHANNEL_MAX,
    LUT_DECODE_SIZE,
    LUT_ENCODE_SIZE,
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
)
from ..utils import clamp01

logger = logging.getLogger(__name__)

_decode_table: Optional[NDArray] = None
_encode_table: Optional[NDArray] = None


## Reference implementation

def decode_srgb_reference(code: int) -> float:
    """Decode an 8-bit sRGB code to linear light in [0, 1]."""
    srgb = code / CHANNEL_MAX
    if srgb <= SRGB_DECODE_THRESHOLD:
        return srgb / SRGB_LINEAR_SLOPE
    return ((srgb + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA


def encode_srgb_reference(linear: float) -> int:
    """Encode linear light to an 8-bit sRGB code, clamping and rounding half-up."""
    lin = clamp01(linear)
    if lin <= SRGB_ENCODE_THRESHOLD:
        encoded = SRGB_LINEAR_SLOPE * lin
    else:
        encoded = (1 + SRGB_OFFSET) * lin ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return int(math.floor(encoded * CHANNEL_MAX + 0.5))


def np_decode_srgb(codes: NDArray) -> NDArray:
    """
    Vectorized: decode sRGB codes (any shape) to linear light.

    Args:
        codes: array-like of values in [0, 255]

    Returns:
        float64 array of the same shape, in [0, 1]
    """
    srgb = np.asarray(codes, dtype=np.float64) / CHANNEL_MAX
    return np.where(
        srgb <= SRGB_DECODE_THRESHOLD,
        srgb / SRGB_LINEAR_SLOPE,
        ((srgb + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA,
    )


def np_encode_srgb(linear: NDArray) -> NDArray:
    """
    Vectorized: encode linear light (any shape) to 8-bit sRGB codes.

    Args:
        linear: array-like of linear values, clamped to [0, 1]

    Returns:
        uint8 array of the same shape
    """
    lin = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    encoded = np.where(
        lin <= SRGB_ENCODE_THRESHOLD,
        SRGB_LINEAR_SLOPE * lin,
        (1 + SRGB_OFFSET) * lin ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET,
    )
    return np.floor(encoded * CHANNEL_MAX + 0.5).astype(np.uint8)


## Lookup-table fast path

def _get_decode_table() -> NDArray:
    global _decode_table
    if _decode_table is None:
        table = np_decode_srgb(np.arange(LUT_DECODE_SIZE))
        table.setflags(write=False)
        _decode_table = table
        logger.debug("Built sRGB decode table with %d entries", LUT_DECODE_SIZE)
    return _decode_table


def _get_encode_table() -> NDArray:
    global _encode_table
    if _encode_table is None:
        table = np_encode_srgb(np.linspace(0.0, 1.0, LUT_ENCODE_SIZE))
        table.setflags(write=False)
        _encode_table = table
        logger.debug("Built sRGB encode table with %d entries", LUT_ENCODE_SIZE)
    return _encode_table


def decode_srgb_lut(code: int) -> float:
    return float(_get_decode_table()[code])


def encode_srgb_lut(linear: float) -> int:
    index = int(math.floor(clamp01(linear) * (LUT_ENCODE_SIZE - 1) + 0.5))
    return int(_get_encode_table()[index])


## Public interface

def decode_srgb(code: int, *, use_lut: bool = False) -> float:
    """
    Decode an 8-bit sRGB channel to linear light.

    Args:
        code: Encoded channel in [0, 255]
        use_lut: Use the lookup-table fast path instead of the formula

    Returns:
        Linear value in [0, 1]
    """
    if use_lut:
        return decode_srgb_lut(code)
    return decode_srgb_reference(code)


def encode_srgb(linear: float, *, use_lut: bool = False) -> int:
    """
    Encode a linear-light value to an 8-bit sRGB channel.

    Args:
        linear: Linear value; anything outside [0, 1] is clamped
        use_lut: Use the lookup-table fast path instead of the formula

    Returns:
        Encoded channel in [0, 255]
    """
    if use_lut:
        return encode_srgb_lut(linear)
    return encode_srgb_reference(linear)

"""Resolution of numeric tokens to 8-bit channel values."""
from typing import Tuple

from ..types.constants import CHANNEL_MAX, PERCENT_MAX
from ..utils import round_half_up
from .errors import InvalidTokenError, OutOfRangeError


def _split_percent(num: str) -> Tuple[str, bool]:
    if num.endswith("%"):
        return num[:-1], True
    return num, False


def _to_float(core: str, num: str) -> float:
    try:
        return float(core)
    except ValueError:
        raise InvalidTokenError(num) from None


def _to_int(core: str, num: str) -> int:
    try:
        return int(core)
    except ValueError:
        raise InvalidTokenError(num) from None


def parse_percentage(core: str, num: str) -> int:
    value = _to_float(core, num)
    if not 0.0 <= value <= PERCENT_MAX:
        raise OutOfRangeError(num)
    return round_half_up(value / PERCENT_MAX * CHANNEL_MAX)


def parse_rgb_component(num: str) -> int:
    """
    Resolve a red/green/blue token.

    ``N%`` needs 0 <= N <= 100 and scales to 0-255; a bare integer must be
    0-255; any other bare number must lie in [0, 255] and is rounded.
    """
    core, is_percent = _split_percent(num)
    if is_percent:
        return parse_percentage(core, num)

    try:
        value = int(core)
    except ValueError:
        value = _to_float(core, num)
        if not 0.0 <= value <= CHANNEL_MAX:
            raise OutOfRangeError(num) from None
        return round_half_up(value)

    if not 0 <= value <= CHANNEL_MAX:
        raise OutOfRangeError(num)
    return value


def parse_alpha_component(num: str) -> int:
    """
    Resolve an alpha token.

    A bare number is read first as a fraction in [0, 1]; only if that fails
    is it read as an integer 0-255. So ``1`` means opaque, ``128`` means 128.
    """
    core, is_percent = _split_percent(num)
    if is_percent:
        return parse_percentage(core, num)

    try:
        fraction = float(core)
    except ValueError:
        fraction = None
    if fraction is not None and 0.0 <= fraction <= 1.0:
        return round_half_up(fraction * CHANNEL_MAX)

    value = _to_int(core, num)
    if not 0 <= value <= CHANNEL_MAX:
        raise OutOfRangeError(num)
    return value

from __future__ import annotations
from numbers import Integral
from typing import Any, ClassVar, Iterator, Tuple

from boundednumbers import clamp

from ..types.color_types import ChannelSequence, RGBATuple, RGBTuple, Scalar
from ..types.constants import CHANNEL_MAX
from ..utils import get_dimension, round_half_up


def to_channel(value: Scalar) -> int:
    """Coerce a number to a valid 8-bit channel (round half-up, then clamp)."""
    if not isinstance(value, Integral):
        value = round_half_up(float(value))
    return int(clamp(int(value), 0, CHANNEL_MAX))


class Color:
    """
    An 8-bit-per-channel sRGB color with straight (non-premultiplied) alpha.

    Channels are always gamma-encoded sRGB in ``[0, 255]``; alpha ``0`` is fully
    transparent. Instances are immutable: every operation returns a new color.

    >>> Color(255, 128, 0)
    Color(r=255, g=128, b=0, a=255)
    >>> str(Color(255, 128, 0).with_alpha(64))
    '#FF800040'
    """

    __slots__ = ('_value', '_is_frozen')  # no __dict__

    TRANSPARENT: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    WHITE: ClassVar[Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar = 0, g: Scalar = 0, b: Scalar = 0, a: Scalar = CHANNEL_MAX) -> None:
        self._value: RGBATuple = (to_channel(r), to_channel(g), to_channel(b), to_channel(a))
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, rgb: ChannelSequence) -> Color:
        """Build an opaque color from a 3-channel sequence."""
        if get_dimension(rgb) != 3:
            raise ValueError(f"rgb expects 3 channels, got {rgb!r}")
        r, g, b = rgb
        return cls(r, g, b)

    @classmethod
    def from_rgba(cls, rgba: ChannelSequence) -> Color:
        """Build a color from a 4-channel sequence."""
        if get_dimension(rgba) != 4:
            raise ValueError(f"rgba expects 4 channels, got {rgba!r}")
        r, g, b, a = rgba
        return cls(r, g, b, a)

    @classmethod
    def from_bytes(cls, data: bytes) -> Color:
        """Build a color from 3 (RGB) or 4 (RGBA) raw bytes."""
        if len(data) == 3:
            return cls.from_rgb(tuple(data))
        if len(data) == 4:
            return cls.from_rgba(tuple(data))
        raise ValueError(f"expected 3 or 4 bytes, got {len(data)}")

    def with_alpha(self, a: Scalar) -> Color:
        """Return a copy of this color with a new alpha channel."""
        r, g, b, _ = self._value
        return self.__class__(r, g, b, a)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBATuple:
        return self._value

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def a(self) -> int:
        return self._value[3]

    @property
    def is_opaque(self) -> bool:
        return self._value[3] == CHANNEL_MAX

    @property
    def is_transparent(self) -> bool:
        return self._value[3] == 0

    # ------------------ EXPORT ------------------
    def into_rgb(self) -> RGBTuple:
        r, g, b, _ = self._value
        return (r, g, b)

    def into_rgba(self) -> RGBATuple:
        return self._value

    def into_hex6(self) -> str:
        """Lowercase ``rrggbb`` without a leading ``#``."""
        return "{:02x}{:02x}{:02x}".format(*self.into_rgb())

    def into_hex8(self) -> str:
        """Lowercase ``rrggbbaa`` without a leading ``#``."""
        return "{:02x}{:02x}{:02x}{:02x}".format(*self._value)

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __bytes__(self) -> bytes:
        return bytes(self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self) -> Tuple[type, RGBATuple]:
        return (self.__class__, self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(r={r}, g={g}, b={b}, a={a})"

    def __str__(self) -> str:
        # lossless: alpha is always included
        return "#{:02X}{:02X}{:02X}{:02X}".format(*self._value)


Color.TRANSPARENT = Color(0, 0, 0, 0)
Color.BLACK = Color(0, 0, 0, 255)
Color.RED = Color(255, 0, 0, 255)
Color.GREEN = Color(0, 255, 0, 255)
Color.BLUE = Color(0, 0, 255, 255)
Color.WHITE = Color(255, 255, 255, 255)

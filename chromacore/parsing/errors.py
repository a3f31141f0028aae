"""Typed errors raised while parsing color text."""

from __future__ import annotations
from enum import Enum
from typing import ClassVar, Optional


class ParseErrorKind(str, Enum):
    EMPTY = "empty"
    INVALID_LENGTH = "invalid_length"
    INVALID_HEX = "invalid_hex"
    INVALID_FUNC = "invalid_func"
    OUT_OF_RANGE = "out_of_range"
    INVALID_TOKEN = "invalid_token"


class ColorParseError(ValueError):
    """Base class for color parsing failures."""

    kind: ClassVar[ParseErrorKind]
    message: ClassVar[str] = "invalid color"

    def __init__(self, text: Optional[str] = None):
        detail = self.message if text is None else f"{self.message}: {text!r}"
        super().__init__(detail)
        self.text = text


class EmptyColorError(ColorParseError):
    """Raised when the input is empty or only whitespace."""

    kind = ParseErrorKind.EMPTY
    message = "empty color string"


class InvalidLengthError(ColorParseError):
    """Raised when a hex color does not have 3, 4, 6 or 8 digits."""

    kind = ParseErrorKind.INVALID_LENGTH
    message = "invalid hex length"


class InvalidHexError(ColorParseError):
    """Raised when a hex color contains a non-hex character."""

    kind = ParseErrorKind.INVALID_HEX
    message = "invalid hex digits"


class InvalidFuncError(ColorParseError):
    """Raised for an unknown function name or a malformed argument list."""

    kind = ParseErrorKind.INVALID_FUNC
    message = "invalid function name"


class OutOfRangeError(ColorParseError):
    """Raised when a numeric component is outside its allowed range."""

    kind = ParseErrorKind.OUT_OF_RANGE
    message = "component out of range"


class InvalidTokenError(ColorParseError):
    """Raised for characters or tokens the function grammar does not allow."""

    kind = ParseErrorKind.INVALID_TOKEN
    message = "invalid token found in function"

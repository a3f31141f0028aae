from .css import parse_color, parse_hex, parse_css_rgb
from .components import parse_rgb_component, parse_alpha_component
from .tokenizer import tokenize, Token, TokenKind
from .errors import (
    ColorParseError,
    ParseErrorKind,
    EmptyColorError,
    InvalidLengthError,
    InvalidHexError,
    InvalidFuncError,
    OutOfRangeError,
    InvalidTokenError,
)

__all__ = [
    'parse_color',
    'parse_hex',
    'parse_css_rgb',
    'parse_rgb_component',
    'parse_alpha_component',
    'tokenize',
    'Token',
    'TokenKind',
    'ColorParseError',
    'ParseErrorKind',
    'EmptyColorError',
    'InvalidLengthError',
    'InvalidHexError',
    'InvalidFuncError',
    'OutOfRangeError',
    'InvalidTokenError',
]

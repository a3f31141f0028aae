"""
CSS color text parser.

Accepted input:

- ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA`` (hex digits in any case)
- ``rgb()`` / ``rgba()`` with the legacy comma syntax ``rgb(255, 0, 0, 0.5)``
  or the modern space/slash syntax ``rgb(255 0 0 / 50%)``; components may be
  integers, decimals or percentages
"""
from __future__ import annotations
import logging
from typing import Iterator, List, Optional

from ..colors.color import Color
from .components import parse_alpha_component, parse_rgb_component
from .errors import (
    ColorParseError,
    EmptyColorError,
    InvalidFuncError,
    InvalidHexError,
    InvalidLengthError,
    InvalidTokenError,
)
from .tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
FUNCTION_PREFIXES = ("rgb(", "rgba(")

## Hex

def parse_hex(digits: str) -> Color:
    """
    Parse hex digits (without the leading ``#``).

    Short forms duplicate each nibble, so ``abc`` equals ``aabbcc``.

    Raises:
        InvalidLengthError: Not 3, 4, 6 or 8 digits
        InvalidHexError: A character is not a hex digit
    """
    if len(digits) not in (3, 4, 6, 8):
        raise InvalidLengthError(digits)
    if not all(ch in HEX_DIGITS for ch in digits):
        raise InvalidHexError(digits)

    if len(digits) in (3, 4):
        channels = [int(ch, 16) * 17 for ch in digits]
    else:
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]

    if len(channels) == 3:
        return Color.from_rgb(channels)
    return Color.from_rgba(channels)

## rgb() / rgba()

def _expect_number(it: Iterator[Token], error: type[ColorParseError], text: str) -> str:
    token = next(it, None)
    if token is None or not token.is_number:
        raise error(text)
    return token.text


def _split_legacy(tokens: List[Token], text: str):
    """``r, g, b`` optionally followed by ``, a`` or ``/ a``; a trailing comma is rejected."""
    comps: List[str] = []
    alpha: Optional[str] = None
    it = iter(tokens)

    while True:
        num = _expect_number(it, InvalidFuncError, text)
        if len(comps) < 3:
            comps.append(num)
        else:
            alpha = num

        sep = next(it, None)
        if sep is None:
            break
        if alpha is not None:
            # nothing may follow the alpha
            raise InvalidFuncError(text)
        if sep.kind is TokenKind.COMMA:
            continue
        if sep.kind is TokenKind.SLASH:
            # not CSS, but accepted: rgb(r, g, b / a)
            alpha = _expect_number(it, InvalidTokenError, text)
            if next(it, None) is not None:
                raise InvalidFuncError(text)
            break
        raise InvalidTokenError(text)

    return comps, alpha


def _split_modern(tokens: List[Token], text: str):
    """``r g b`` optionally followed by ``/ a``."""
    comps: List[str] = []
    alpha: Optional[str] = None
    it = iter(tokens)

    for token in it:
        if token.kind is TokenKind.NUMBER:
            if alpha is not None:
                raise InvalidFuncError(text)
            comps.append(token.text)
        elif token.kind is TokenKind.SLASH:
            if alpha is not None:
                raise InvalidFuncError(text)
            alpha = _expect_number(it, InvalidTokenError, text)
        else:
            raise InvalidTokenError(text)

    return comps, alpha


def parse_css_rgb(args: str) -> Color:
    """
    Parse the arguments of ``rgb(...)`` / ``rgba(...)``.

    The presence of any comma selects the legacy grammar, otherwise the modern
    space/slash grammar is used. Either way exactly three color components
    are required; alpha defaults to 255.
    """
    tokens = tokenize(args)
    if not tokens:
        raise InvalidFuncError(args)

    if any(token.kind is TokenKind.COMMA for token in tokens):
        comps, alpha = _split_legacy(tokens, args)
    else:
        comps, alpha = _split_modern(tokens, args)

    if len(comps) != 3:
        raise InvalidFuncError(args)

    r, g, b = (parse_rgb_component(c) for c in comps)
    a = 255 if alpha is None else parse_alpha_component(alpha)
    return Color(r, g, b, a)

## Entry point

def _function_args(text: str) -> Optional[str]:
    lower = text.lower()
    for prefix in FUNCTION_PREFIXES:
        if lower.startswith(prefix) and lower.endswith(")"):
            return text[len(prefix):-1]
    return None


def parse_color(text: str) -> Color:
    """
    Parse CSS color text into a ``Color``.

    Args:
        text: ``#hex``, ``rgb(...)`` or ``rgba(...)``, surrounding whitespace ignored

    Returns:
        The parsed color

    Raises:
        ColorParseError: One of its subclasses, naming the rule that failed

    >>> parse_color("rgb(255 0 0 / 50%)")
    Color(r=255, g=0, b=0, a=128)
    """
    s = text.strip()
    try:
        if not s:
            raise EmptyColorError()
        if s.startswith("#"):
            return parse_hex(s[1:].strip())
        args = _function_args(s)
        if args is None:
            raise InvalidFuncError(s)
        return parse_css_rgb(args)
    except ColorParseError as exc:
        logger.debug("Rejected color %r (%s)", text, exc.kind.value)
        raise

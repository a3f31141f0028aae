from __future__ import annotations
from enum import Enum
from typing import List, NamedTuple

from .errors import InvalidTokenError

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset("0123456789")
NUMBER_START = DIGITS | frozenset("+-.")


class TokenKind(str, Enum):
    NUMBER = "number"
    SLASH = "slash"
    COMMA = "comma"


class Token(NamedTuple):
    kind: TokenKind
    text: str

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER


SLASH = Token(TokenKind.SLASH, "/")
COMMA = Token(TokenKind.COMMA, ",")


def _scan_digits(text: str, i: int) -> int:
    while i < len(text) and text[i] in DIGITS:
        i += 1
    return i


def tokenize(text: str) -> List[Token]:
    """
    Split the inside of a CSS color function into tokens.

    Numbers are an optional sign, digits, an optional ``.`` with digits and an
    optional trailing ``%``. ``/`` and ``,`` are single-character tokens and
    ASCII whitespace separates tokens. Anything else is rejected.

    Args:
        text: Function arguments, without the surrounding parentheses

    Returns:
        List of tokens in input order

    Raises:
        InvalidTokenError: On the first character that starts no token
    """
    tokens: List[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in WHITESPACE:
            i += 1
        elif ch in NUMBER_START:
            start = i
            if ch in "+-":
                i += 1
            i = _scan_digits(text, i)
            if i < len(text) and text[i] == ".":
                i = _scan_digits(text, i + 1)
            if i < len(text) and text[i] == "%":
                i += 1
            tokens.append(Token(TokenKind.NUMBER, text[start:i]))
        elif ch == "/":
            tokens.append(SLASH)
            i += 1
        elif ch == ",":
            tokens.append(COMMA)
            i += 1
        else:
            raise InvalidTokenError(text)
    return tokens

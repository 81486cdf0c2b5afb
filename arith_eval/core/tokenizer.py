"""Lazy tokenizer for arithmetic expressions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .errors import LexError


class TokenKind(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"
    END = "end"


OPERATORS = frozenset("+-*/")

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    position: int
    value: Optional[float] = None
    symbol: Optional[str] = None


def _scan_number(expression: str, start: int) -> int:
    """Returns the index one past the numeric literal starting at `start`.

    Raises:
        LexError: On a second decimal point or a literal without digits.
    """
    index = start
    seen_point = False
    seen_digit = False
    while index < len(expression):
        char = expression[index]
        if char in _DIGITS:
            seen_digit = True
        elif char == ".":
            if seen_point:
                raise LexError(index, char)
            seen_point = True
        else:
            break
        index += 1

    if not seen_digit:
        raise LexError(start, expression[start])
    return index


def tokenize(expression: str) -> Iterator[Token]:
    """Yields tokens left to right, finishing with a single END token.

    Args:
        expression: Raw arithmetic expression.

    Yields:
        `Token` instances; whitespace is skipped.

    Raises:
        LexError: When a character is not part of the expression alphabet.
    """
    index = 0
    length = len(expression)

    while index < length:
        char = expression[index]
        if char.isspace():
            index += 1
            continue

        if char in _DIGITS or char == ".":
            end = _scan_number(expression, index)
            value = float(expression[index:end])
            if math.isinf(value):
                raise LexError(
                    index,
                    char,
                    "Numeric literal at position {} is out of double-precision range".format(index),
                )
            yield Token(TokenKind.NUMBER, index, value=value)
            index = end
            continue

        if char in OPERATORS:
            yield Token(TokenKind.OPERATOR, index, symbol=char)
        elif char == "(":
            yield Token(TokenKind.LPAREN, index, symbol=char)
        elif char == ")":
            yield Token(TokenKind.RPAREN, index, symbol=char)
        else:
            raise LexError(index, char)
        index += 1

    yield Token(TokenKind.END, length)

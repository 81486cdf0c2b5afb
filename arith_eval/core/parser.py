"""Recursive-descent parser producing expression trees.

Grammar::

    expr   := term (('+'|'-') term)*
    term   := factor (('*'|'/') factor)*
    factor := NUMBER | '(' expr ')' | '-' factor
"""

from __future__ import annotations

from typing import Iterator, Tuple

from .errors import ExpressionSyntaxError
from .tokenizer import Token, TokenKind, tokenize
from .tree import BinaryOp, Literal, Node, negate

# Bounds both parenthesis/unary nesting and tree height; the parser and the
# evaluator recurse once per level and must stay under the interpreter limit.
MAX_DEPTH = 200


def _describe(token: Token) -> str:
    if token.kind == TokenKind.END:
        return "end of input"
    if token.kind == TokenKind.NUMBER:
        return "number"
    return "'{}'".format(token.symbol)


class _Parser:
    def __init__(self, tokens: Iterator[Token], max_depth: int) -> None:
        self._tokens = tokens
        self._current = next(self._tokens)
        self._max_depth = max_depth
        self._nesting = 0

    def _advance(self) -> Token:
        token = self._current
        if token.kind != TokenKind.END:
            self._current = next(self._tokens)
        return token

    def _at_operator(self, symbols: str) -> bool:
        return self._current.kind == TokenKind.OPERATOR and self._current.symbol in symbols

    def _check_depth(self, depth: int, position: int) -> None:
        if depth > self._max_depth:
            raise ExpressionSyntaxError(
                "Expression nested too deeply (max depth {})".format(self._max_depth),
                position,
            )

    def parse(self) -> Node:
        if self._current.kind == TokenKind.END:
            raise ExpressionSyntaxError("Expression is empty", self._current.position)

        node, _ = self._expr()
        if self._current.kind != TokenKind.END:
            raise ExpressionSyntaxError(
                "Unexpected {} after complete expression".format(_describe(self._current)),
                self._current.position,
            )
        return node

    def _join(self, operator_token: Token, left: Tuple[Node, int], right: Tuple[Node, int]) -> Tuple[Node, int]:
        depth = max(left[1], right[1]) + 1
        self._check_depth(depth, operator_token.position)
        return BinaryOp(operator_token.symbol, left[0], right[0]), depth

    def _expr(self) -> Tuple[Node, int]:
        result = self._term()
        while self._at_operator("+-"):
            operator_token = self._advance()
            result = self._join(operator_token, result, self._term())
        return result

    def _term(self) -> Tuple[Node, int]:
        result = self._factor()
        while self._at_operator("*/"):
            operator_token = self._advance()
            result = self._join(operator_token, result, self._factor())
        return result

    def _factor(self) -> Tuple[Node, int]:
        token = self._current
        if token.kind == TokenKind.NUMBER:
            self._advance()
            return Literal(token.value), 0

        if token.kind == TokenKind.LPAREN:
            self._nesting += 1
            self._check_depth(self._nesting, token.position)
            self._advance()
            node, depth = self._expr()
            if self._current.kind != TokenKind.RPAREN:
                raise ExpressionSyntaxError(
                    "Expected ')' to close '(' at position {}, found {}".format(
                        token.position, _describe(self._current)
                    ),
                    self._current.position,
                )
            self._advance()
            self._nesting -= 1
            return node, depth

        if self._at_operator("-"):
            self._nesting += 1
            self._check_depth(self._nesting, token.position)
            self._advance()
            operand, depth = self._factor()
            self._nesting -= 1
            self._check_depth(depth + 1, token.position)
            return negate(operand), depth + 1

        raise ExpressionSyntaxError(
            "Expected a number, '(' or '-', found {}".format(_describe(token)),
            token.position,
        )


def parse(expression: str, max_depth: int = MAX_DEPTH) -> Node:
    """Parses an arithmetic expression into a tree.

    Args:
        expression: Raw arithmetic expression.
        max_depth: Limit on nesting and tree height, at most `MAX_DEPTH`.

    Raises:
        LexError: On characters outside the expression alphabet.
        ExpressionSyntaxError: On empty input, a missing factor, an unclosed
            parenthesis, trailing tokens or nesting beyond `max_depth`.
    """
    if not 0 < max_depth <= MAX_DEPTH:
        raise ValueError("max_depth must be between 1 and {}, got {}".format(MAX_DEPTH, max_depth))
    return _Parser(tokenize(expression), max_depth).parse()

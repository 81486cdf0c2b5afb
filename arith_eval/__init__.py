"""arith-eval: tokenizer, parser and evaluator for arithmetic expressions."""

from arith_eval.core import (
    BinaryOp,
    EvalError,
    ExpressionArithmeticError,
    ExpressionSyntaxError,
    LexError,
    Literal,
    Node,
    Token,
    TokenKind,
    evaluate_tree,
    parse,
    tokenize,
)
from arith_eval.tools import evaluate, evaluate_expression

__version__ = "1.0.0"

__all__ = [
    "BinaryOp",
    "EvalError",
    "ExpressionArithmeticError",
    "ExpressionSyntaxError",
    "LexError",
    "Literal",
    "Node",
    "Token",
    "TokenKind",
    "evaluate",
    "evaluate_expression",
    "evaluate_tree",
    "parse",
    "tokenize",
]

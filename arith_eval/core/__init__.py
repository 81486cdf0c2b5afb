"""Tokenizer, parser and evaluator for arithmetic expressions."""

from .errors import EvalError, ExpressionArithmeticError, ExpressionSyntaxError, LexError
from .evaluator import DIVISION_POLICIES, evaluate_tree
from .parser import MAX_DEPTH, parse
from .tokenizer import Token, TokenKind, tokenize
from .tree import BinaryOp, Literal, Node, node_to_dict, to_infix

__all__ = [
    "EvalError",
    "LexError",
    "ExpressionSyntaxError",
    "ExpressionArithmeticError",
    "DIVISION_POLICIES",
    "evaluate_tree",
    "MAX_DEPTH",
    "parse",
    "Token",
    "TokenKind",
    "tokenize",
    "BinaryOp",
    "Literal",
    "Node",
    "node_to_dict",
    "to_infix",
]

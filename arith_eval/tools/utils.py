"""Input preparation helpers applied before tokenizing."""

from __future__ import annotations

from typing import Optional

from arith_eval.core import ExpressionSyntaxError
from arith_eval.utils.config_loader import EvaluatorSettings

# One-for-one replacements only, so error positions still index the caller's text.
_UNICODE_REPLACEMENTS = {
    "−": "-",
    "–": "-",
    "—": "-",
    "×": "*",
    "÷": "/",
    "·": "*",
    "∙": "*",
    "⁄": "/",
}

_UNICODE_TABLE = str.maketrans(_UNICODE_REPLACEMENTS)


def normalize_math_unicode(expression: str) -> str:
    if not expression:
        return expression
    return expression.translate(_UNICODE_TABLE)


def prepare_expression(expression: str, settings: Optional[EvaluatorSettings] = None) -> str:
    """Normalizes operator glyphs and enforces the configured length limit.

    Args:
        expression: Raw user expression.
        settings: Evaluator settings; defaults apply when omitted.

    Returns:
        Expression ready for the tokenizer.

    Raises:
        ExpressionSyntaxError: If the expression exceeds `max_length`.
    """
    settings = settings or EvaluatorSettings()
    if len(expression) > settings.max_length:
        raise ExpressionSyntaxError(
            "Expression exceeds max length of {} characters".format(settings.max_length),
            settings.max_length,
        )
    if settings.normalize_unicode:
        return normalize_math_unicode(expression)
    return expression

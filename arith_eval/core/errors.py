"""Error taxonomy for expression evaluation."""

from __future__ import annotations

from typing import Any, Dict, Optional


class EvalError(ValueError):
    """Base class for every failure produced while evaluating an expression."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__, "message": str(self)}


class LexError(EvalError):
    """Raised when the tokenizer meets a character or literal it cannot accept."""

    def __init__(self, position: int, character: str, message: Optional[str] = None) -> None:
        super().__init__(message or "Unexpected character {!r} at position {}".format(character, position))
        self.position = position
        self.character = character

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload.update({"position": self.position, "character": self.character})
        return payload


class ExpressionSyntaxError(EvalError):
    """Raised when the token stream does not match the expression grammar."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__("{} (position {})".format(message, position))
        self.message = message
        self.position = position

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload.update({"position": self.position})
        return payload


class ExpressionArithmeticError(EvalError):
    """Raised when a well-formed expression has no finite value, e.g. `1/0`."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload.update({"reason": self.reason})
        return payload

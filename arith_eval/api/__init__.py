"""HTTP service and client for arith-eval."""

from .client import ApiEvaluationError, build_evaluate_payload, call_evaluate_api
from .server import create_app

__all__ = ["ApiEvaluationError", "build_evaluate_payload", "call_evaluate_api", "create_app"]

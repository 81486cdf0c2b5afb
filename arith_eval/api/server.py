"""REST interface for arith-eval."""

from __future__ import annotations

import math
import time
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from arith_eval.core import EvalError, node_to_dict, to_infix
from arith_eval.tools import evaluate, parse_prepared
from arith_eval.utils.config_loader import AppConfig
from arith_eval.utils.logger import get_logger

logger = get_logger("arith_eval.api")


class ExpressionRequest(BaseModel):
    expression: str = Field(..., description="Arithmetic expression, e.g. '2*(3+4)'")


class EvaluateResponse(BaseModel):
    expression: str
    result: Optional[float]
    non_finite: Optional[str] = None


class ParseResponse(BaseModel):
    expression: str
    tree: Dict[str, Any]
    infix: str


class HealthResponse(BaseModel):
    status: str
    version: str


def _non_finite_label(value: float) -> Optional[str]:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return None


def _to_http_exception(exc: EvalError) -> HTTPException:
    return HTTPException(status_code=422, detail=exc.to_dict())


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Builds and configures the FastAPI application.

    Args:
        config: Application config; defaults apply when omitted.

    Returns:
        Configured FastAPI app instance.
    """
    config = config or AppConfig()
    settings = config.evaluator
    app = FastAPI(title="arith-eval API", version=config.version)

    def _request_id(request: Request) -> str:
        return request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]

    @app.get("/health", response_model=HealthResponse)
    async def health() -> Dict[str, Any]:
        return {"status": "ok", "version": config.version}

    @app.post("/v1/evaluate", response_model=EvaluateResponse)
    def evaluate_endpoint(payload: ExpressionRequest, request: Request) -> Dict[str, Any]:
        request_id = _request_id(request)
        started_at = time.perf_counter()
        try:
            value = evaluate(payload.expression, settings)
        except EvalError as exc:
            logger.warning(
                "evaluate_rejected request_id=%s error_type=%s error=%s",
                request_id,
                type(exc).__name__,
                exc,
            )
            raise _to_http_exception(exc) from exc

        elapsed_ms = (time.perf_counter() - started_at) * 1000.0
        logger.info("evaluate_done request_id=%s elapsed_ms=%.3f", request_id, elapsed_ms)
        label = _non_finite_label(value)
        return {
            "expression": payload.expression,
            "result": None if label else value,
            "non_finite": label,
        }

    @app.post("/v1/parse", response_model=ParseResponse)
    def parse_endpoint(payload: ExpressionRequest, request: Request) -> Dict[str, Any]:
        request_id = _request_id(request)
        try:
            tree = parse_prepared(payload.expression, settings)
        except EvalError as exc:
            logger.warning(
                "parse_rejected request_id=%s error_type=%s error=%s",
                request_id,
                type(exc).__name__,
                exc,
            )
            raise _to_http_exception(exc) from exc

        logger.info("parse_done request_id=%s", request_id)
        return {"expression": payload.expression, "tree": node_to_dict(tree), "infix": to_infix(tree)}

    return app

"""HTTP client helpers for a remote arith-eval service."""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx

from arith_eval.utils.logger import get_logger

logger = get_logger("arith_eval.api.client")


class ApiEvaluationError(RuntimeError):
    """Raised when the service rejects an expression (HTTP 422)."""

    def __init__(self, detail: Dict[str, Any]) -> None:
        super().__init__(str(detail.get("message", detail)))
        self.detail = detail
        self.error_type = str(detail.get("type", "EvalError"))


def build_evaluate_payload(expression: str) -> Dict[str, Any]:
    """Builds the JSON body for `/v1/evaluate`.

    Raises:
        ValueError: If the expression is blank.
    """
    if not expression or not expression.strip():
        raise ValueError("expression is required")
    return {"expression": expression}


def _extract_error_detail(raw_text: str) -> Any:
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError:
        return raw_text
    if isinstance(payload, dict) and "detail" in payload:
        return payload["detail"]
    return payload


def call_evaluate_api(
    base_url: str,
    expression: str,
    timeout_seconds: float = 10.0,
    request_id: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Dict[str, Any]:
    """Calls the REST evaluate endpoint using httpx.

    Args:
        base_url: API base URL.
        expression: Expression to evaluate remotely.
        timeout_seconds: Request timeout in seconds.
        request_id: Optional correlation id forwarded as `X-Request-ID`.
        transport: Optional httpx transport, used by tests.

    Returns:
        Response dictionary from API.

    Raises:
        ApiEvaluationError: If the service rejects the expression.
        RuntimeError: If HTTP/network errors occur.
    """
    payload = build_evaluate_payload(expression)
    endpoint = base_url.rstrip("/") + "/v1/evaluate"
    started_at = time.perf_counter()
    logger.info("HTTP POST start endpoint=%s timeout=%ss", endpoint, timeout_seconds)
    try:
        with httpx.Client(timeout=timeout_seconds, transport=transport) as client:
            headers = {"X-Request-ID": request_id} if request_id else None
            response = client.post(endpoint, json=payload, headers=headers)
    except httpx.ConnectError as exc:
        elapsed_ms = (time.perf_counter() - started_at) * 1000.0
        logger.error("HTTP connect error endpoint=%s elapsed_ms=%.1f error=%s", endpoint, elapsed_ms, exc)
        raise RuntimeError("Could not connect to API: {}".format(exc)) from exc
    except httpx.TimeoutException as exc:
        elapsed_ms = (time.perf_counter() - started_at) * 1000.0
        logger.error("HTTP timeout endpoint=%s elapsed_ms=%.1f", endpoint, elapsed_ms)
        raise RuntimeError("API timed out after {}s".format(timeout_seconds)) from exc

    elapsed_ms = (time.perf_counter() - started_at) * 1000.0
    logger.info("HTTP POST done endpoint=%s status=%s elapsed_ms=%.1f", endpoint, response.status_code, elapsed_ms)
    if response.status_code == 422:
        detail = _extract_error_detail(response.text)
        if isinstance(detail, dict):
            raise ApiEvaluationError(detail)
    if response.status_code >= 400:
        detail = _extract_error_detail(response.text)
        raise RuntimeError("API error {}: {}".format(response.status_code, detail))
    return response.json()

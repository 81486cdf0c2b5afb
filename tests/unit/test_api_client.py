import json
import unittest

import httpx

from arith_eval.api.client import ApiEvaluationError, build_evaluate_payload, call_evaluate_api


class ApiClientTestCase(unittest.TestCase):
    def test_build_payload(self) -> None:
        self.assertEqual(build_evaluate_payload("1+1"), {"expression": "1+1"})

    def test_build_payload_requires_expression(self) -> None:
        with self.assertRaises(ValueError):
            build_evaluate_payload("   ")

    def test_call_evaluate_api_success(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            seen["request_id"] = request.headers.get("X-Request-ID")
            return httpx.Response(200, json={"expression": "5-1", "result": 4.0, "non_finite": None})

        result = call_evaluate_api(
            "http://arith.test/",
            "5-1",
            request_id="req-9",
            transport=httpx.MockTransport(handler),
        )
        self.assertEqual(result["result"], 4.0)
        self.assertEqual(seen["path"], "/v1/evaluate")
        self.assertEqual(seen["body"], {"expression": "5-1"})
        self.assertEqual(seen["request_id"], "req-9")

    def test_call_evaluate_api_rejected_expression(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422,
                json={"detail": {"type": "LexError", "message": "Unexpected character 'a' at position 2", "position": 2}},
            )

        with self.assertRaises(ApiEvaluationError) as ctx:
            call_evaluate_api("http://arith.test", "1+a", transport=httpx.MockTransport(handler))
        self.assertEqual(ctx.exception.error_type, "LexError")
        self.assertEqual(ctx.exception.detail["position"], 2)

    def test_call_evaluate_api_server_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="internal error")

        with self.assertRaises(RuntimeError) as ctx:
            call_evaluate_api("http://arith.test", "1+1", transport=httpx.MockTransport(handler))
        self.assertIn("500", str(ctx.exception))

    def test_call_evaluate_api_connect_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(RuntimeError) as ctx:
            call_evaluate_api("http://arith.test", "1+1", transport=httpx.MockTransport(handler))
        self.assertIn("Could not connect", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()

import unittest

from fastapi.testclient import TestClient

from arith_eval.api.server import create_app
from arith_eval.utils.config_loader import AppConfig, EvaluatorSettings


class ApiServerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(create_app())

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok", "version": "1.0.0"})

    def test_evaluate_success(self) -> None:
        response = self.client.post("/v1/evaluate", json={"expression": "2*(3+4)"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["expression"], "2*(3+4)")
        self.assertEqual(body["result"], 14.0)
        self.assertIsNone(body["non_finite"])

    def test_evaluate_division_by_zero_is_rejected(self) -> None:
        response = self.client.post("/v1/evaluate", json={"expression": "10/0"})
        self.assertEqual(response.status_code, 422)
        detail = response.json()["detail"]
        self.assertEqual(detail["type"], "ExpressionArithmeticError")
        self.assertEqual(detail["reason"], "Division by zero")

    def test_evaluate_lex_error_detail(self) -> None:
        response = self.client.post("/v1/evaluate", json={"expression": "1+a"}, headers={"X-Request-ID": "req-1"})
        self.assertEqual(response.status_code, 422)
        detail = response.json()["detail"]
        self.assertEqual(detail["type"], "LexError")
        self.assertEqual(detail["position"], 2)
        self.assertEqual(detail["character"], "a")

    def test_evaluate_syntax_error_detail(self) -> None:
        response = self.client.post("/v1/evaluate", json={"expression": "1+"})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["type"], "ExpressionSyntaxError")

    def test_missing_expression_is_validation_error(self) -> None:
        response = self.client.post("/v1/evaluate", json={})
        self.assertEqual(response.status_code, 422)
        self.assertIsInstance(response.json()["detail"], list)

    def test_ieee_policy_reports_non_finite(self) -> None:
        config = AppConfig(evaluator=EvaluatorSettings(division_by_zero="ieee"))
        client = TestClient(create_app(config))
        response = client.post("/v1/evaluate", json={"expression": "-1/0"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIsNone(body["result"])
        self.assertEqual(body["non_finite"], "-inf")

    def test_deep_nesting_is_unprocessable_not_server_error(self) -> None:
        config = AppConfig(evaluator=EvaluatorSettings(max_length=5000))
        client = TestClient(create_app(config))
        expression = "(" * 1200 + "1" + ")" * 1200
        for path in ("/v1/evaluate", "/v1/parse"):
            with self.subTest(path=path):
                response = client.post(path, json={"expression": expression})
                self.assertEqual(response.status_code, 422)
                detail = response.json()["detail"]
                self.assertEqual(detail["type"], "ExpressionSyntaxError")
                self.assertEqual(detail["position"], 200)

    def test_parse_endpoint(self) -> None:
        response = self.client.post("/v1/parse", json={"expression": "1+2*3"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["infix"], "(1 + (2 * 3))")
        self.assertEqual(body["tree"]["right"]["operator"], "*")

    def test_parse_endpoint_rejects_unclosed_parenthesis(self) -> None:
        response = self.client.post("/v1/parse", json={"expression": "(1+2"})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["position"], 4)


if __name__ == "__main__":
    unittest.main()

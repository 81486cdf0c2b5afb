import tempfile
import unittest

from arith_eval.utils.config_loader import AppConfig, EvaluatorSettings
from arith_eval.utils.doc_generator import generate_config_docs


class DocGeneratorTestCase(unittest.TestCase):
    def test_generate_docs(self) -> None:
        config = AppConfig(evaluator=EvaluatorSettings(division_by_zero="ieee"))
        with tempfile.TemporaryDirectory() as tmpdir:
            path = generate_config_docs(config, f"{tmpdir}/docs/CONFIGURATION.md")
            with open(path, "r", encoding="utf-8") as handle:
                content = handle.read()
        self.assertIn("# arith-eval configuration", content)
        self.assertIn("- division_by_zero: ieee", content)
        self.assertIn("- max_depth: 200", content)
        self.assertIn("- port: 8000", content)


if __name__ == "__main__":
    unittest.main()

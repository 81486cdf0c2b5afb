"""CLI/API entrypoint for arith-eval."""

from __future__ import annotations

import argparse
import json
import math
from pathlib import Path
from typing import Any, Dict, Optional

from arith_eval.tools import evaluate_expression, parse_expression
from arith_eval.utils import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    EvaluatorSettings,
    configure_logging,
    generate_config_docs,
    get_logger,
    load_app_config,
)

logger = get_logger("arith_eval.main")


def build_parser() -> argparse.ArgumentParser:
    """Builds CLI argument parser for app entrypoints.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="arith-eval", description="Evaluate arithmetic expressions")
    parser.add_argument("--mode", choices=["cli", "api"], default="cli")
    parser.add_argument("--expression", "-e", type=str, default="", help="Expression to evaluate (cli mode)")
    parser.add_argument("--tree", action="store_true", help="Include the parsed expression tree in the output")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    parser.add_argument("--host", type=str, default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument("--generate-docs", action="store_true", help="Generate markdown docs from YAML config")
    parser.add_argument("--docs-output", type=str, default="docs/CONFIGURATION.md")
    return parser


def resolve_config(path: Optional[str]) -> AppConfig:
    """Loads config from `path`, the default file when present, or defaults."""
    if path:
        return load_app_config(path)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_app_config(DEFAULT_CONFIG_PATH)
    return AppConfig()


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def run_cli(expression: str, settings: EvaluatorSettings, include_tree: bool = False) -> int:
    """Evaluates one expression and prints the outcome as JSON.

    Returns:
        0 on success, 1 when the expression is rejected.
    """
    outcome = evaluate_expression(expression, settings)
    report: Dict[str, Any] = {"expression": expression, "ok": outcome["ok"]}
    if outcome["ok"]:
        report["result"] = _json_safe(outcome["result"])
        if include_tree:
            parsed = parse_expression(expression, settings)
            report["tree"] = parsed["result"]["tree"]
            report["infix"] = parsed["result"]["infix"]
    else:
        report["error"] = outcome["error"]
        report["error_type"] = outcome["metadata"]["error_type"]
        logger.info("cli_rejected error_type=%s", report["error_type"])

    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0 if outcome["ok"] else 1


def run_api(config: AppConfig, host: Optional[str], port: Optional[int]) -> int:
    """Runs FastAPI server using Uvicorn.

    Returns:
        Process exit code.
    """
    import uvicorn

    from arith_eval.api import create_app

    app = create_app(config)
    uvicorn.run(app, host=host or config.api.host, port=port or config.api.port)
    return 0


def main(argv: Optional[list] = None) -> int:
    """Application entrypoint for CLI and API modes.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = resolve_config(args.config)
    configure_logging(args.log_level or config.logging.level)

    if args.generate_docs:
        output = generate_config_docs(config, args.docs_output)
        print("Configuration docs generated at {}".format(output))
        return 0

    if args.mode == "api":
        return run_api(config, args.host, args.port)

    if not args.expression:
        parser.error("--expression is required in cli mode")
    return run_cli(args.expression, config.evaluator, include_tree=args.tree)


if __name__ == "__main__":
    raise SystemExit(main())

"""Generate human-readable documentation from the YAML configuration."""

from __future__ import annotations

from pathlib import Path

from arith_eval.utils.config_loader import AppConfig


def generate_config_docs(config: AppConfig, output_path: str) -> str:
    lines = [
        "# arith-eval configuration",
        "",
        "- version: {}".format(config.version),
        "",
        "## Evaluator",
        "",
        "- max_length: {}".format(config.evaluator.max_length),
        "- max_depth: {}".format(config.evaluator.max_depth),
        "- division_by_zero: {}".format(config.evaluator.division_by_zero),
        "- normalize_unicode: {}".format(config.evaluator.normalize_unicode),
        "",
        "## Logging",
        "",
        "- level: {}".format(config.logging.level),
        "",
        "## API",
        "",
        "- host: {}".format(config.api.host),
        "- port: {}".format(config.api.port),
        "",
    ]

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text("\n".join(lines), encoding="utf-8")
    return str(output)

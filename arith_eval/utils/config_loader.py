"""Configuration loader for YAML-based evaluator, logging and API settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from arith_eval.core import DIVISION_POLICIES, MAX_DEPTH

DEFAULT_CONFIG_PATH = "configs/evaluator.yml"


@dataclass
class EvaluatorSettings:
    max_length: int = 400
    max_depth: int = MAX_DEPTH
    division_by_zero: str = "error"
    normalize_unicode: bool = True


@dataclass
class LoggingSettings:
    level: str = "INFO"


@dataclass
class ApiSettings:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class AppConfig:
    version: str = "1.0.0"
    evaluator: EvaluatorSettings = field(default_factory=EvaluatorSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    api: ApiSettings = field(default_factory=ApiSettings)


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError("Configuration file not found: {}".format(path))
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ConfigError("Configuration root must be a mapping in {}".format(path))
    return loaded


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {}) or {}
    if not isinstance(section, dict):
        raise ConfigError("'{}' must be a mapping".format(name))
    return section


def build_evaluator_settings(data: Dict[str, Any]) -> EvaluatorSettings:
    settings = EvaluatorSettings(
        max_length=int(data.get("max_length", 400)),
        max_depth=int(data.get("max_depth", MAX_DEPTH)),
        division_by_zero=str(data.get("division_by_zero", "error")).strip().lower(),
        normalize_unicode=bool(data.get("normalize_unicode", True)),
    )
    if settings.max_length <= 0:
        raise ConfigError("evaluator.max_length must be positive, got {}".format(settings.max_length))
    if not 0 < settings.max_depth <= MAX_DEPTH:
        raise ConfigError(
            "evaluator.max_depth must be between 1 and {}, got {}".format(MAX_DEPTH, settings.max_depth)
        )
    if settings.division_by_zero not in DIVISION_POLICIES:
        raise ConfigError(
            "evaluator.division_by_zero must be one of {}, got '{}'".format(
                ", ".join(DIVISION_POLICIES), settings.division_by_zero
            )
        )
    return settings


def load_app_config(path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    data = _load_yaml(Path(path))
    logging_data = _section(data, "logging")
    api_data = _section(data, "api")

    return AppConfig(
        version=str(data.get("version", "1.0.0")),
        evaluator=build_evaluator_settings(_section(data, "evaluator")),
        logging=LoggingSettings(level=str(logging_data.get("level", "INFO")).upper()),
        api=ApiSettings(
            host=str(api_data.get("host", "0.0.0.0")),
            port=int(api_data.get("port", 8000)),
        ),
    )

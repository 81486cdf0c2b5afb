"""Utility helpers for arith-eval."""

from .config_loader import (
    DEFAULT_CONFIG_PATH,
    ApiSettings,
    AppConfig,
    ConfigError,
    EvaluatorSettings,
    LoggingSettings,
    load_app_config,
)
from .doc_generator import generate_config_docs
from .logger import configure_logging, get_logger

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ApiSettings",
    "AppConfig",
    "ConfigError",
    "EvaluatorSettings",
    "LoggingSettings",
    "load_app_config",
    "generate_config_docs",
    "configure_logging",
    "get_logger",
]

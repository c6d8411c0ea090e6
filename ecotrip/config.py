"""Configuration loader for the Eco-Friendly Trip Planner."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml

from ecotrip.data.trip_log import DEFAULT_HISTORY_PATH

DEFAULT_CONFIG_PATH = "config/config.yaml"
HISTORY_PATH_ENV = "ECOTRIP_HISTORY_PATH"


@dataclass(frozen=True)
class HistoryConfig:
    """Trip log location."""

    path: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    history: HistoryConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _history_path(configured: str) -> str:
    override = os.environ.get(HISTORY_PATH_ENV, "").strip()
    return override or configured


def default_config() -> AppConfig:
    """Built-in configuration used when no config file is present."""
    load_dotenv()
    return AppConfig(
        history=HistoryConfig(path=_history_path(DEFAULT_HISTORY_PATH)),
        log=LoggingConfig(level="INFO", log_dir="logs/"),
    )


def resolve_config(path: str | None = None) -> AppConfig:
    """Load `path` when given, else the default config file if present, else built-in defaults."""
    if path:
        return load_config(path)
    if os.path.exists(DEFAULT_CONFIG_PATH):
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


def load_config(path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    history_section = _require_key(data, "history", "history")
    logging_section = _require_key(data, "logging", "logging")

    if not isinstance(history_section, dict):
        raise ValueError("'history' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    history_path = _require_key(history_section, "path", "history")
    if not isinstance(history_path, str) or not history_path.strip():
        raise ValueError("'history.path' must be a non-empty string")

    history = HistoryConfig(path=_history_path(history_path))

    logging = LoggingConfig(
        level=str(_require_key(logging_section, "level", "logging")),
        log_dir=str(_require_key(logging_section, "log_dir", "logging")),
    )

    return AppConfig(history=history, log=logging)


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "HistoryConfig",
    "LoggingConfig",
    "default_config",
    "load_config",
    "resolve_config",
]

"""Configuration loader for the Todo API."""

import os
from pathlib import Path

import yaml

ENV_PREFIX = "TODO_API_"

DEFAULTS = {
    "app_name": "TodoApi",
    "environment": "development",
    "database_url": "sqlite://",
    "host": "127.0.0.1",
    "port": 8100,
    "log_level": "INFO",
    "log_format": "console",
}

LOG_FORMATS = ("console", "json")

_config: dict | None = None


def load_config(config_path: str | None = None) -> dict:
    """Load config from an explicit path, TODO_API_CONFIG, or ./config.yaml.

    The file is optional. TODO_API_<KEY> environment variables override file
    values, and anything still missing comes from DEFAULTS.
    """
    path = (
        config_path
        or os.environ.get(ENV_PREFIX + "CONFIG")
        or (str(Path("config.yaml")) if Path("config.yaml").exists() else None)
    )

    cfg: dict = {}
    if path:
        with open(path) as f:
            cfg = yaml.safe_load(f) or {}

    for k, v in DEFAULTS.items():
        env_value = os.environ.get(ENV_PREFIX + k.upper())
        if env_value is not None:
            cfg[k] = env_value
        cfg.setdefault(k, v)

    try:
        cfg["port"] = int(cfg["port"])
    except (TypeError, ValueError):
        raise ValueError(f"port must be an integer, got {cfg['port']!r}")

    cfg["log_format"] = str(cfg["log_format"]).lower()
    if cfg["log_format"] not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {cfg['log_format']!r}")

    return cfg


def get_config() -> dict:
    """Get or load the process-wide config."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    global _config
    _config = None


def is_development(cfg: dict) -> bool:
    return str(cfg["environment"]).lower() == "development"

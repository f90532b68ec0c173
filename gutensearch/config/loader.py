"""Configuration loading utilities."""

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from gutensearch.config.schema import Config

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "ESHOST": ("elasticsearch", "host"),
    "ESPORT": ("elasticsearch", "port"),
    "PGHOST": ("postgres", "host"),
    "PGPORT": ("postgres", "port"),
    "PGDATABASE": ("postgres", "database"),
    "PGUSER": ("postgres", "user"),
    "PGPASSWORD": ("postgres", "password"),
    "DATABASE_URL": ("postgres", "dsn"),
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".gutensearch" / "config.json"


def load_config(config_path: Path | None = None, environ: dict[str, str] | None = None) -> Config:
    """
    Load configuration from file, then apply environment overrides.

    Args:
        config_path: Optional path to config file. Uses default if not provided.
        environ: Environment mapping. Uses os.environ if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()
    env = os.environ if environ is None else environ

    data: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = _read_root(json.load(f))
        except ValueError as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            data = {}

    data = _apply_env(data, env)
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid config in {}: {}. Using default configuration.", path, e)
        return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _read_root(data: Any) -> dict:
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")
    return data


def _apply_env(data: dict, environ: Any) -> dict:
    for name, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(name)
        if not value:
            continue
        # A null or scalar section in the file is replaced by the override
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][key] = value
    return data

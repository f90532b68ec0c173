"""Configuration module for gutensearch."""

from gutensearch.config.loader import get_config_path, load_config, save_config
from gutensearch.config.schema import Config

__all__ = ["Config", "get_config_path", "load_config", "save_config"]

"""Configuration module for websurf."""

from websurf.config.loader import get_config_path, load_config, save_config
from websurf.config.schema import Config, EnginesConfig

__all__ = ["Config", "EnginesConfig", "load_config", "save_config", "get_config_path"]

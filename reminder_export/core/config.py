"""
Configuration management for reminder2json.
"""

import os
from pathlib import Path
from typing import Optional

from .models import ExportConfig


CONFIG_ENV_VAR = "REMINDER2JSON_CONFIG"
CONFIG_DIR_NAME = "reminder2json"
CONFIG_FILE = "config.json"


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE


def load_config(config_path: Optional[str] = None) -> ExportConfig:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        ExportConfig object
    """
    if config_path is None:
        config_path = str(get_default_config_path())

    return ExportConfig.load_from_file(config_path)


def save_config(config: ExportConfig, config_path: Optional[str] = None) -> Path:
    """
    Save configuration to file.

    Args:
        config: ExportConfig object to save
        config_path: Optional path to save to. Uses default if not provided.

    Returns:
        The path the configuration was written to
    """
    if config_path is None:
        config_path = str(get_default_config_path())

    config.save_to_file(config_path)
    return Path(config_path).expanduser()

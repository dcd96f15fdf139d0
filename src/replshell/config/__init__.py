"""Configuration management for replshell."""

from replshell.config.config import (
    CONFIG_DIR,
    DEFAULTS,
    ConfigManager,
    ShellConfig,
    get_config,
    get_config_manager,
)

__all__ = [
    "CONFIG_DIR",
    "DEFAULTS",
    "ConfigManager",
    "ShellConfig",
    "get_config",
    "get_config_manager",
]

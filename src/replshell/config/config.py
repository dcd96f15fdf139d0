"""
Configuration management for replshell.

Settings are layered, lowest priority first:

1. Field defaults (DEFAULTS)
2. ~/.replshell/config.json
3. ~/.replshell/config.<environment>.json (optional)
4. REPLSHELL_* environment variables
5. Explicit overrides (command line)
"""

from __future__ import annotations

import json
import logging
import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".replshell"

ENV_PREFIX = "REPLSHELL_"


def _installed_version() -> str:
    try:
        return version("replshell")
    except PackageNotFoundError:
        return "<unknown>"


# Default values - single source of truth
DEFAULTS: dict[str, Any] = {
    "app_name": "ReplShell",
    "prompt": ">> ",
    "command_modules": ["replshell.contrib.prompt"],
    "commands_dir": str(CONFIG_DIR / "commands"),
    "strict_discovery": True,
    "color": True,
    "log_level": "WARNING",
    "log_file": str(CONFIG_DIR / "logs" / "replshell.log"),
    "environment": "production",
}


class ShellConfig(BaseModel):
    """Runtime settings for the shell.

    ``prompt`` is mutable while the shell runs; commands may replace it.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    app_name: str = Field(
        default=DEFAULTS["app_name"],
        description="Application name shown in the banner, help and title"
    )
    app_version: str = Field(
        default_factory=_installed_version,
        description="Application version shown in the banner and title"
    )
    console_title: Optional[str] = Field(
        default=None,
        description="Terminal title (defaults to '<app_name> <app_version>')"
    )
    prompt: str = Field(
        default=DEFAULTS["prompt"],
        description="Prompt written before each input line"
    )
    command_modules: list[str] = Field(
        default_factory=lambda: list(DEFAULTS["command_modules"]),
        description="Importable modules (or paths) that provide extra commands"
    )
    commands_dir: Optional[str] = Field(
        default=DEFAULTS["commands_dir"],
        description="Directory of plugin command packages"
    )
    strict_discovery: bool = Field(
        default=DEFAULTS["strict_discovery"],
        description="Only scan external modules that set __repl_commands__ = True"
    )
    color: bool = Field(
        default=DEFAULTS["color"],
        description="Use coloured console output"
    )
    log_level: str = Field(
        default=DEFAULTS["log_level"],
        description="Logging level for the log file"
    )
    log_file: Optional[str] = Field(
        default=DEFAULTS["log_file"],
        description="Log file path (null disables file logging)"
    )
    environment: str = Field(
        default=DEFAULTS["environment"],
        description="Environment name, selects config.<environment>.json"
    )

    @model_validator(mode="after")
    def _default_title(self) -> "ShellConfig":
        if not self.console_title:
            self.console_title = f"{self.app_name} {self.app_version}"
        return self


class ConfigManager:
    """Loads layered configuration from files and the environment."""

    CONFIG_DIR = CONFIG_DIR
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self, environ: Optional[dict[str, str]] = None):
        self._config: Optional[ShellConfig] = None
        self._environ = os.environ if environ is None else environ

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def config(self) -> ShellConfig:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    @property
    def environment(self) -> str:
        return self._environ.get(f"{ENV_PREFIX}ENVIRONMENT", DEFAULTS["environment"]).lower()

    def environment_file(self, environment: Optional[str] = None) -> Path:
        return self.CONFIG_DIR / f"config.{environment or self.environment}.json"

    def load(
        self,
        create_if_missing: bool = True,
        overrides: Optional[dict[str, Any]] = None,
    ) -> ShellConfig:
        """Load configuration from all layers.

        Args:
            create_if_missing: If True, create the default config file if it doesn't exist.
            overrides: Highest-priority values, typically from the command line.

        Returns:
            ShellConfig with merged settings, or defaults if the files are invalid.
        """
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        environment = (overrides.get("environment") or self.environment).lower()

        if not self.CONFIG_FILE.exists() and create_if_missing:
            self._create_default_config()

        data: dict[str, Any] = {}
        data.update(self._read_json(self.CONFIG_FILE))
        data.update(self._read_json(self.environment_file(environment)))
        data.update(self._read_environ())
        data.update(overrides)
        data["environment"] = environment

        if "NO_COLOR" in self._environ:
            data["color"] = False

        try:
            config = ShellConfig.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Invalid configuration ({e}), using defaults")
            config = ShellConfig(environment=environment)

        self._config = config
        return config

    def _read_json(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Invalid config file {path} ({e}), ignoring")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Config file {path} is not a JSON object, ignoring")
            return {}
        return {k: v for k, v in data.items() if v is not None}

    def _read_environ(self) -> dict[str, Any]:
        """Collect REPLSHELL_<FIELD> variables; list fields are comma-separated."""
        result: dict[str, Any] = {}
        for key, field in ShellConfig.model_fields.items():
            raw = self._environ.get(f"{ENV_PREFIX}{key.upper()}")
            if raw is None:
                continue
            if field.annotation == list[str]:
                result[key] = [part.strip() for part in raw.split(",") if part.strip()]
            else:
                result[key] = raw
        return result

    def _create_default_config(self) -> None:
        """Create default config file with actual default values."""
        self._ensure_dir()

        default_config = {"_comment": "replshell configuration file", **DEFAULTS}
        # Environment is chosen via REPLSHELL_ENVIRONMENT, not the file
        default_config.pop("environment")
        self.CONFIG_FILE.write_text(json.dumps(default_config, indent=2) + "\n")


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> ShellConfig:
    """Get the current configuration."""
    return get_config_manager().config

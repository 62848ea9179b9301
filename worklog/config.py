"""Configuration for the worklog CLI.

Loads from YAML config file with environment variable overrides.
Pattern: WORKLOG__{KEY} overrides top-level YAML keys.
Example: WORKLOG__LOG_FILE=~/work/hours.txt
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "worklog" / "config.yml"
DEFAULT_LOG_FILE = Path.home() / "timetracker.txt"

ENV_PREFIX = "WORKLOG"


class WorklogConfig(BaseModel):
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = Field(default="WARNING", description="Python logging level name")
    encoding: str = "utf-8"

    @field_validator("log_file", mode="before")
    @classmethod
    def _expand_user(cls, value):
        return Path(str(value)).expanduser()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def _apply_env_overrides(config_dict: dict, prefix: str = ENV_PREFIX) -> dict:
    """Apply environment variable overrides to config dict.

    Pattern: WORKLOG__KEY=value maps to config[key] = value
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}__"):
            continue
        name = key[len(prefix) + 2 :].lower()
        if name:
            config_dict[name] = value
    return config_dict


def load_config(config_path: Optional[str] = None) -> WorklogConfig:
    """Load configuration from YAML file with env overrides.

    Priority: env vars > YAML file > defaults
    """
    config_dict = {}

    # 1. Load YAML if exists
    if config_path is None:
        config_path = os.getenv("WORKLOG_CONFIG", str(DEFAULT_CONFIG_PATH))
    path = Path(config_path).expanduser()
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        if not isinstance(config_dict, dict):
            raise ConfigError(f"Config {path} must be a mapping")

    # 2. Apply env overrides
    config_dict = _apply_env_overrides(config_dict)

    try:
        return WorklogConfig(**config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


_config: Optional[WorklogConfig] = None


def get_config() -> WorklogConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Optional[str] = None) -> WorklogConfig:
    global _config
    _config = load_config(config_path)
    return _config

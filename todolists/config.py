"""Global configuration storage for todolists.

Stores server and storage settings in ~/.todolists/config.json. Environment
variables override whatever the file says.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

ENV_HOME = "TODOLISTS_HOME"
ENV_OVERRIDES = {
    "TODOLISTS_DATA": "data_path",
    "TODOLISTS_HOST": "host",
    "TODOLISTS_PORT": "port",
    "TODOLISTS_LOG_LEVEL": "log_level",
}


def get_config_dir() -> Path:
    """Get the todolists config directory."""
    override = os.environ.get(ENV_HOME)
    config_dir = Path(override).expanduser() if override else Path.home() / ".todolists"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def _default_data_path() -> Path:
    return get_config_dir() / "db.json"


class AppConfig(BaseModel):
    """Server and storage settings."""

    data_path: Path = Field(default_factory=_default_data_path)
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


def _apply_env(data: dict) -> dict:
    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data[key] = value
    return data


def get_global_config() -> AppConfig:
    """Load global configuration, then apply environment overrides."""
    config_file = get_config_dir() / "config.json"
    data: dict = {}
    if config_file.exists():
        try:
            loaded = json.loads(config_file.read_text(encoding="utf-8"))
            data = AppConfig(**loaded).model_dump()
        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid config file {config_file}: {e}")

    try:
        return AppConfig(**_apply_env(data))
    except ValidationError as e:
        logger.warning(f"Ignoring invalid environment overrides: {e}")
        return AppConfig(**data)


def save_global_config(config: AppConfig) -> None:
    """Save global configuration."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(config.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )

"""Settings file loading and validation.

Schema on disk (~/.config/unity-defines/config.json):

    {
        "order": "preserve",
        "log_level": "WARNING"
    }

Every key is optional.  Keys prefixed with "_" are reserved for comments and
are stripped on load.  The file is never created or written by the tool.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from unity_defines.models import SymbolOrder

CONFIG_PATH = Path("~/.config/unity-defines/config.json").expanduser()

CONFIG_ENV_VAR = "UNITY_DEFINES_CONFIG"


class Settings(BaseModel):
    """User preferences applied to every run."""

    model_config = ConfigDict(extra="forbid")

    order: SymbolOrder = SymbolOrder.PRESERVE
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level


class ConfigError(Exception):
    """Raised when the settings file exists but cannot be parsed or validated."""


def settings_path() -> Path:
    """Return the settings path, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate the settings file.

    Returns defaults when the file does not exist or is empty.  Raises
    ConfigError if the file exists but is malformed.
    """
    path = path or settings_path()
    if not path.exists():
        return Settings()

    content = path.read_text(encoding="utf-8")
    if not content.strip():
        return Settings()

    try:
        raw: object = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{path.name} must be a JSON object at the top level")

    # Strip reserved/comment keys.
    data = {k: v for k, v in raw.items() if not k.startswith("_")}

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc

"""Lighthouse config models and loading helpers."""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class LogLevel(StrEnum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class StorageSettings(BaseModel):
    """Persistence file settings."""

    model_config = ConfigDict(extra="forbid")

    file: str = Field(default="artifacts.json", min_length=1)
    indent: int = Field(default=2, ge=1, le=8)


class ExplorerSettings(BaseModel):
    """Defaults applied to owners created by the artifact prompt."""

    model_config = ConfigDict(extra="forbid")

    default_rank: str = Field(default="Novice", min_length=1)
    default_experience: int = Field(default=0, ge=0)


class LoggingSettings(BaseModel):
    """Console logging settings."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = LogLevel.WARNING


class LighthouseConfig(BaseModel):
    """Root Lighthouse configuration model."""

    model_config = ConfigDict(extra="forbid")

    storage: StorageSettings = StorageSettings()
    explorer: ExplorerSettings = ExplorerSettings()
    logging: LoggingSettings = LoggingSettings()


class ConfigError(RuntimeError):
    """Raised when config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError("Invalid config payload: root must be an object")
    return payload


def load_config(path: Path) -> LighthouseConfig:
    """Load config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        ConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return LighthouseConfig()
    payload = _decode_config_payload(path)
    try:
        return LighthouseConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config payload: {exc}") from exc


def default_config_file(root: Path) -> Path:
    """Return config path under ``root``, preferring YAML over JSON.

    Args:
        root: Directory to look in.

    Returns:
        Existing config path, or the YAML path when neither exists.
    """
    yaml_path = root / "lighthouse.yaml"
    json_path = root / "lighthouse.json"
    if yaml_path.exists():
        return yaml_path
    if json_path.exists():
        return json_path
    return yaml_path

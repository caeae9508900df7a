"""Reader settings resolved from defaults, an optional YAML file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigurationError

CONFIG_PATH_ENV = "ILCD_READER_CONFIG"
LOG_LEVEL_ENV = "ILCD_READER_LOG_LEVEL"
LOG_FORMAT_ENV = "ILCD_READER_LOG_FORMAT"
LOG_FILE_ENV = "ILCD_READER_LOG_FILE"
MAX_ENTRY_BYTES_ENV = "ILCD_READER_MAX_ENTRY_BYTES"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"json", "console"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime options shared by the reader and the logging setup."""

    log_level: str = "INFO"
    log_format: str = "json"
    # None logs to stdout.
    log_file: Path | None = None
    # Upper bound for a single entry's uncompressed size; None disables the check.
    max_entry_bytes: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        unknown = set(data) - {"log_level", "log_format", "log_file", "max_entry_bytes"}
        if unknown:
            raise ConfigurationError(f"Unknown settings: {', '.join(sorted(unknown))}")
        settings = cls()
        if "log_level" in data:
            settings = replace(settings, log_level=_parse_log_level(data["log_level"]))
        if "log_format" in data:
            settings = replace(settings, log_format=_parse_log_format(data["log_format"]))
        if "log_file" in data:
            settings = replace(settings, log_file=_parse_log_file(data["log_file"]))
        if "max_entry_bytes" in data:
            settings = replace(settings, max_entry_bytes=_parse_max_bytes(data["max_entry_bytes"]))
        return settings


def _parse_log_level(value: Any) -> str:
    if not isinstance(value, str) or value.strip().upper() not in _LOG_LEVELS:
        raise ConfigurationError(f"Invalid log level: {value!r}")
    return value.strip().upper()


def _parse_log_format(value: Any) -> str:
    if not isinstance(value, str) or value.strip().lower() not in _LOG_FORMATS:
        raise ConfigurationError(f"log_format must be 'json' or 'console', got {value!r}")
    return value.strip().lower()


def _parse_log_file(value: Any) -> Path | None:
    if value is None or value == "":
        return None
    if not isinstance(value, (str, os.PathLike)):
        raise ConfigurationError(f"log_file must be a path, got {value!r}")
    return Path(value)


def _parse_max_bytes(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"max_entry_bytes must be an integer, got {value!r}") from exc
    if parsed <= 0:
        raise ConfigurationError(f"max_entry_bytes must be positive, got {parsed}")
    return parsed


def load_settings_file(path: Path) -> Settings:
    """Load settings from a YAML mapping."""
    if not path.exists():
        raise ConfigurationError(f"Settings file '{path}' does not exist")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Settings file '{path}' is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must deserialize to a mapping.")
    return Settings.from_mapping(data)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    config_path = env.get(CONFIG_PATH_ENV)
    settings = load_settings_file(Path(config_path)) if config_path else Settings()
    if env.get(LOG_LEVEL_ENV):
        settings = replace(settings, log_level=_parse_log_level(env[LOG_LEVEL_ENV]))
    if env.get(LOG_FORMAT_ENV):
        settings = replace(settings, log_format=_parse_log_format(env[LOG_FORMAT_ENV]))
    if LOG_FILE_ENV in env:
        settings = replace(settings, log_file=_parse_log_file(env[LOG_FILE_ENV]))
    if MAX_ENTRY_BYTES_ENV in env:
        settings = replace(settings, max_entry_bytes=_parse_max_bytes(env[MAX_ENTRY_BYTES_ENV]))
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return load_settings()

"""Configuration loading with fail-fast behavior.

Sources, later ones winning:
1. Pydantic defaults
2. A JSON file: the explicit path if given, else ./simplemcp.json if present
3. Environment variables (SIMPLEMCP_LOG_FILE, SIMPLEMCP_FETCH_TIMEOUT)
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from simplemcp.config.schema import Config
from simplemcp.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "simplemcp.json"

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "SIMPLEMCP_LOG_FILE": ("logging", "file"),
    "SIMPLEMCP_FETCH_TIMEOUT": ("fetch", "timeout"),
}


def load_config(
    path: Path | None = None,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load and validate configuration.

    Args:
        path: Explicit config file path. Must exist if given.
        cwd: Directory searched for simplemcp.json when path is None.
            Defaults to Path.cwd().
        environ: Environment mapping for overrides. Defaults to os.environ.

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If the file is missing (explicit path only), contains
            invalid JSON, or the merged config fails validation.
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_config_file(path)
        source = str(path)
    else:
        local = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
        if local.is_file():
            data = _read_config_file(local)
            source = str(local)
        else:
            data = {}
            source = "defaults"

    data = _apply_env_overrides(data, os.environ if environ is None else environ)

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed ({source}): {e}") from e

    logger.debug("Config loaded from: %s", source)
    return config


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read a config file. An empty file counts as an empty object."""
    try:
        content = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not content:
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


def _apply_env_overrides(data: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Return a copy of data with environment overrides applied.

    Values are passed through as strings; pydantic coerces them.
    """
    merged = {k: dict(v) if isinstance(v, dict) else v for k, v in data.items()}
    for var, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(var)
        if not value:
            continue
        target = merged.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = value
    return merged

"""Logic for loading generator configuration files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from resxgen.deep_merge import deep_merge
from resxgen.options_provider import MappingOptionsProvider

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "assembly_name": None,
    "supports_nullable_attributes": True,
    "max_workers": 1,
    "global_options": {},
    "file_options": {},
}


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.info("Config file %s not found, using defaults", p)
        return config

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {p}: {e}"
        raise ConfigError(msg) from e
    if not isinstance(user_config, dict):
        msg = f"Config file {p} must contain a mapping"
        raise ConfigError(msg)
    return deep_merge(config, user_config)


def _option_text(value: object) -> str:
    """Stringify a YAML scalar the way it would appear in a build property."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _options_map(raw: object) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(k): _option_text(v) for k, v in raw.items() if v is not None}


def options_from_config(
    config: dict[str, Any], base_dir: str | None = None
) -> MappingOptionsProvider:
    """Build an options provider from the option sections of a config.

    Relative paths under ``file_options`` are made absolute against base_dir.
    """
    file_options: dict[str, dict[str, str]] = {}
    for raw_path, raw_options in (config.get("file_options") or {}).items():
        path = str(raw_path)
        if base_dir is not None and not os.path.isabs(path):
            path = os.path.join(base_dir, path)
        file_options[path] = _options_map(raw_options)
    return MappingOptionsProvider(
        global_options=_options_map(config.get("global_options")),
        file_options=file_options,
    )

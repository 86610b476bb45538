"""YAML config loader with runtime get."""

import logging
from pathlib import Path
from typing import Any

import yaml

from metcast.config.schema import MetcastConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> MetcastConfig:
    """Load and validate config from a YAML file.

    A missing file (or no path at all) yields the built-in defaults.
    """
    if path is None:
        return MetcastConfig()
    path = Path(path)
    if not path.exists():
        logger.debug("Config %s not found, using defaults", path)
        return MetcastConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return MetcastConfig(**raw)


def get_config_value(config: MetcastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'query.time_range'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj

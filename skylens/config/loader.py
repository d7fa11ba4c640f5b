"""YAML config loader with environment overrides and dotted-key lookup."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from skylens.config.schema import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/skylens.yaml")
BASE_URL_ENV = "SKYLENS_BASE_URL"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no explicit path, a missing DEFAULT_CONFIG_PATH yields the built-in
    defaults. An explicit path that does not exist raises FileNotFoundError.
    ``SKYLENS_BASE_URL`` overrides ``api.base_url`` when set.
    """
    raw: dict[str, Any] = {}
    if path is None:
        if DEFAULT_CONFIG_PATH.exists():
            raw = _read_yaml(DEFAULT_CONFIG_PATH)
        else:
            logger.debug("No config at %s, using defaults", DEFAULT_CONFIG_PATH)
    else:
        raw = _read_yaml(Path(path))

    base_url = os.environ.get(BASE_URL_ENV)
    if base_url:
        raw.setdefault("api", {})["base_url"] = base_url

    return AppConfig(**raw)


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        return yaml.safe_load(f) or {}


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.timeout_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if not hasattr(obj, part):
            raise KeyError(f"Config key not found: {dotted_key}")
        obj = getattr(obj, part)
    return obj

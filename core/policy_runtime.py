"""Configuration loading and logging bootstrap."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from core.control_loop import DEFAULT_TOGGLE_SHORTCUT_FLOOR
from core.navigation_engine import DEFAULT_CONTINUATION_DELAY_MS

LOGGER_NAMESPACE = "lud"


class NavigationSettings(BaseModel):
    """Validated ``navigation`` section of the configuration."""

    continuation_delay_ms: int = Field(default=DEFAULT_CONTINUATION_DELAY_MS, ge=100, le=2000)
    debug_enabled: bool = False
    toggle_shortcut_floor: int = Field(default=DEFAULT_TOGGLE_SHORTCUT_FLOOR, ge=1)
    reregister_shortcuts: bool = True
    previous_shortcut_keys: str = "Meta+Tab"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(config_dir: Path) -> dict[str, Any]:
    """Load ``default.yaml`` and apply ``local.yaml`` overrides."""
    default_cfg = load_yaml(config_dir / "default.yaml")
    local_cfg = load_yaml(config_dir / "local.yaml")
    return merge_dicts(default_cfg, local_cfg)


def navigation_settings(config: dict[str, Any]) -> NavigationSettings:
    """Validate the navigation section; invalid values raise ``ValueError``."""
    section = config.get("navigation", {})
    if not isinstance(section, dict):
        raise ValueError("'navigation' config section must be a mapping.")
    return NavigationSettings(**section)


def configure_logging(debug_enabled: bool) -> None:
    """Apply the debug toggle to all project loggers."""
    level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)

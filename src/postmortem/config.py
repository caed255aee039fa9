"""
Configuration management for postmortem.

This module handles loading settings from config.yaml with sensible defaults.
The config file is optional - everything works with defaults for quick setup.

Configuration hierarchy:
1. --config PATH on the command line (if given)
2. $POSTMORTEM_CONFIG (if set)
3. config/config.yaml in the project root (if exists)
4. Built-in defaults (if config missing or key not specified)
"""

import os
from pathlib import Path
from typing import Any

import yaml  # PyYAML


# ---------------------------------------------------------------------------
# Config File Paths
# ---------------------------------------------------------------------------

CONFIG_ENV_VAR = "POSTMORTEM_CONFIG"


def get_project_root() -> Path:
    """
    Get the project root directory.

    This file is at: src/postmortem/config.py
    Project root is: ../../ from here
    """
    return Path(__file__).resolve().parent.parent.parent


def get_config_path() -> Path:
    """
    Get the path to the config file.

    $POSTMORTEM_CONFIG wins over the project-local config/config.yaml.

    Returns:
        Path to the YAML file (which may or may not exist)
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_project_root() / "config" / "config.yaml"


# ---------------------------------------------------------------------------
# Default Configuration
# ---------------------------------------------------------------------------

# Structure mirrors the YAML file for easy mental mapping.
#
# filename_template is formatted with the report's date, so any strftime
# code works inside the braces: {date:%Y}, {date:%m}, {date:%Y-%m-%d}.

DEFAULT_CONFIG = {
    "reports": {
        "path": "~/Daily Postmortems",
        "filename_template": "{date:%Y}/{date:%m}/Daily Postmortem-{date:%Y-%m-%d}.txt",
        "encoding": "utf-8",
    },
    "window": {
        "days": 7,
        "include_today": False,
    },
}


# ---------------------------------------------------------------------------
# Config Loading
# ---------------------------------------------------------------------------

def load_config(config_path: Path | None = None) -> dict:
    """
    Load configuration from file, falling back to defaults.

    Merge strategy:
    - Start with DEFAULT_CONFIG
    - If the YAML file exists, overlay its values
    - Missing keys in YAML use defaults
    - Extra keys in YAML are preserved

    Args:
        config_path: Explicit file to read. Defaults to get_config_path().

    Returns:
        Configuration dictionary with all settings
    """
    config = _deep_copy(DEFAULT_CONFIG)

    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        try:
            # yaml.safe_load() parses YAML to Python objects
            # "safe" means it won't construct arbitrary Python objects
            with open(config_path, encoding="utf-8") as f:
                user_config = yaml.safe_load(f)

            if isinstance(user_config, dict):
                config = _deep_merge(config, user_config)

        except yaml.YAMLError as e:
            print(f"Warning: Error parsing {config_path.name}: {e}")
            print("Using default configuration.")

    return config


def _deep_copy(d: dict) -> dict:
    """
    Create a deep copy of a nested dictionary.

    d.copy() is shallow - nested dicts would still reference the originals.
    """
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy(value)
        else:
            result[key] = value
    return result


def _deep_merge(base: dict, overlay: dict) -> dict:
    """
    Deep merge overlay into base, returning a new dict.

    - Keys in overlay overwrite keys in base
    - Nested dicts are merged recursively
    - Lists and other values are replaced entirely
    """
    result = _deep_copy(base)

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# ---------------------------------------------------------------------------
# Config Access Helpers
# ---------------------------------------------------------------------------

# Global config cache - loaded once, reused
_config_cache: dict | None = None


def get_config() -> dict:
    """
    Get the configuration, loading it if necessary.

    Uses a module-level cache so we only parse YAML once.
    """
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def use_config(config_path: Path | None) -> dict:
    """
    Replace the cached configuration (or drop it when config_path is None).

    The CLI calls this for --config; tests call it to start clean.
    """
    global _config_cache
    _config_cache = load_config(config_path) if config_path is not None else None
    return get_config()


def get(key_path: str, default: Any = None) -> Any:
    """
    Get a config value using dot-notation path.

    Examples:
        get("window.days")            # Returns 7
        get("reports.encoding")       # Returns "utf-8"
        get("nonexistent.key", "x")   # Returns "x"

    Args:
        key_path: Dot-separated path like "reports.path"
        default: Value to return if path not found

    Returns:
        The config value, or default if not found
    """
    value = get_config()
    for key in key_path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


# ---------------------------------------------------------------------------
# Path Expansion
# ---------------------------------------------------------------------------

def expand_path(path_str: str) -> Path:
    """Expand ~ and make the path absolute."""
    return Path(path_str).expanduser().resolve()


def get_reports_path() -> Path:
    """Get the configured report root as a Path object."""
    return expand_path(get("reports.path"))

"""
Configuration loading and merging for storeversion.

Settings come from two layers:

1. **Built-in defaults** (DEFAULT_CONFIG)
   - Lookup endpoint, store country and request timeout
2. **Config file** (storeversion.yaml, or a path given explicitly)
   - Optional; overrides the defaults

Merge Behavior
--------------
The loader performs deep merging with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Config File Format
------------------
    lookup:
      base_url: "https://itunes.apple.com"
      country: "br"
      timeout: 10

Functions
---------
load_config : function
    Load the effective configuration (main public API).

Error Handling
--------------
- ConfigError: explicit file missing, YAML parse errors, empty files,
  non-mapping top level, invalid values for known settings
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from storeversion.config import load_config
    >>> cfg = load_config()
    >>> cfg["lookup"]["country"]
    'us'
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from storeversion.exceptions import ConfigError
from storeversion.logging import get_global_logger

DEFAULT_CONFIG_FILENAME = "storeversion.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "lookup": {
        "base_url": "https://itunes.apple.com",
        "country": "us",
        "timeout": 30,
    },
}


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      ConfigError - when the file does not exist, is empty, or is invalid YAML
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Validation
# -------------------------------


def _validate(cfg: dict[str, Any], source: Path | None) -> None:
    """Check the types of known settings; raise ConfigError on the first problem."""
    where = f" in {source}" if source else ""
    lookup = cfg.get("lookup")
    if not isinstance(lookup, dict):
        raise ConfigError(f"'lookup' must be a mapping{where}")

    for key in ("base_url", "country"):
        value = lookup.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"lookup.{key} must be a non-empty string{where}")

    timeout = lookup.get("timeout")
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"lookup.timeout must be a positive number{where}")


# -------------------------------
# Public API
# -------------------------------


def load_config(path: Path | None = None) -> dict[str, Any]:
    """
    Load the effective configuration.

    Steps
      1) Start from DEFAULT_CONFIG.
      2) Pick the config file: 'path' if given, else ./storeversion.yaml
         when it exists, else no file.
      3) Merge the file over the defaults (dicts deep-merge, lists replace).
      4) Validate known settings.

    Returns
      A new merged configuration dict.

    Raises
      ConfigError if an explicit 'path' is missing, on YAML parse errors,
      empty files, a non-mapping top level, or invalid settings.
    """
    logger = get_global_logger()

    merged = copy.deepcopy(DEFAULT_CONFIG)

    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
        path = candidate if candidate.exists() else None

    if path is not None:
        path = path.resolve()
        logger.verbose("CONFIG", f"Loading: {path}")
        file_cfg = _load_yaml_file(path)
        if not isinstance(file_cfg, dict):
            raise ConfigError(f"top-level YAML must be a mapping (dict): {path}")
        merged = _deep_merge_dicts(merged, file_cfg)
    else:
        logger.verbose("CONFIG", "No config file found, using defaults")

    _validate(merged, path)
    logger.debug("CONFIG", f"Effective config: {merged}")
    return merged

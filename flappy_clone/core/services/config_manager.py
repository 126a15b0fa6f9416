"""
config_manager.py
-----------------
JSON configuration loader for game tunables.

Features:
- Resolves bare filenames against the bundled config directory
- Recursively merges loaded values over defaults
- Ignores '_notes' keys for human-readable configs
- Falls back to defaults (with a warning) on missing or broken files
"""

import os
import json

from flappy_clone.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Bare filename (looked up in CONFIG_DIR) or a path
        default_dict: Default fallback config
        strict: If True, raise instead of falling back to defaults

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = resolve_path(filename)

    try:
        data = _load_json(path)
    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _copy_dict(default_dict)

    if not isinstance(data, dict):
        DebugLogger.warn(f"{path} is not a JSON object - using defaults", category="loading")
        return _copy_dict(default_dict)

    return _merge_dicts(default_dict, data)


def resolve_path(filename):
    """Map a bare filename to CONFIG_DIR; paths with directories pass through."""
    if os.path.isabs(filename) or os.path.dirname(filename):
        return filename
    return os.path.join(CONFIG_DIR, filename)


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = _copy_dict(default)
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _copy_dict(source):
    """Copy nested dicts so callers never mutate the defaults."""
    return {
        key: _copy_dict(value) if isinstance(value, dict) else value
        for key, value in source.items()
    }

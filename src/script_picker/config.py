"""YAML configuration for script-picker.

Lives at ~/.config/script-picker/config.yaml (XDG_CONFIG_HOME aware).
Missing keys fall back to DEFAULT_CONFIG; a missing or unreadable file
means all defaults.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "debug": False,
    "extension": ".sh",
    "invocation": {
        "prefix": "",  # typed before the file name, e.g. an alias like "rb "
        "injector": "",  # command template; "{text}" is replaced by the invocation
        "delay": 0.1,  # seconds for the terminal to settle before injecting
    },
    "ui": {
        "width": 100,
    },
}


def get_config_dir() -> Path:
    """Get the script-picker config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "script-picker"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def get_log_path() -> Path:
    """Get the path to the debug log file."""
    return get_config_dir() / "debug.log"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _conform(cfg: dict, defaults: dict) -> dict:
    """Replace values whose type does not match the default.

    Numbers given as strings are converted when possible; anything else
    that does not fit (a null section, a list where a mapping belongs)
    falls back to the default value.
    """
    result = cfg.copy()
    for key, default in defaults.items():
        value = result.get(key)
        if isinstance(default, dict):
            result[key] = _conform(value, default) if isinstance(value, dict) else copy.deepcopy(default)
        elif isinstance(default, bool):
            result[key] = value if isinstance(value, bool) else default
        elif isinstance(default, (int, float)):
            try:
                result[key] = type(default)(value)
            except (TypeError, ValueError):
                result[key] = default
        elif not isinstance(value, type(default)):
            result[key] = default
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config file merged over the defaults."""
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return copy.deepcopy(DEFAULT_CONFIG)
        return _conform(_deep_merge(copy.deepcopy(DEFAULT_CONFIG), data), DEFAULT_CONFIG)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError):
        return copy.deepcopy(DEFAULT_CONFIG)


def setup_logging(debug: bool, log_path: Path | None = None) -> None:
    """Send package logs to the debug log file when debug is on.

    With debug off nothing is configured and log records are dropped.
    """
    if not debug:
        return
    log_path = log_path or get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    package_logger = logging.getLogger("script_picker")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)

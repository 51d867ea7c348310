"""
Run settings for the scraper.

Defaults come from constants.py. A JSON file can override any of them:

    {
        "base_url": "https://publicholidays.com.my",
        "timeout": 30,
        "headless": true
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    BASE_URL,
    BLOCKED_RESOURCE_TYPES,
    BLOCKED_URL_PATTERNS,
    DEFAULT_TIMEOUT_SECONDS,
)


DEFAULT_CONFIG: Dict[str, Any] = {
    'base_url': BASE_URL,
    'timeout': DEFAULT_TIMEOUT_SECONDS,
    'headless': False,
    'blocked_resource_types': list(BLOCKED_RESOURCE_TYPES),
    'blocked_url_patterns': list(BLOCKED_URL_PATTERNS),
}

# Accepted value types per key
_CONFIG_TYPES = {
    'base_url': (str,),
    'timeout': (int, float),
    'headless': (bool,),
    'blocked_resource_types': (list,),
    'blocked_url_patterns': (list,),
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load run settings, overlaying a JSON file on the defaults.

    Args:
        config_path: Path to a JSON object with overrides (None = defaults only)

    Returns:
        Dict with every key of DEFAULT_CONFIG

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: On malformed JSON, unknown keys or wrong value types
    """
    config = {key: (list(value) if isinstance(value, list) else value)
              for key, value in DEFAULT_CONFIG.items()}

    if config_path is None:
        return config

    with open(config_path, encoding='utf-8') as f:
        try:
            overrides = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(overrides, dict):
        raise ValueError(f"Config must be a JSON object: {config_path}")

    for key, value in overrides.items():
        if key not in _CONFIG_TYPES:
            raise ValueError(f"Unknown config field: {key}")
        # bool is an int subclass; keep it out of numeric fields
        if isinstance(value, bool) and bool not in _CONFIG_TYPES[key]:
            raise ValueError(f"Invalid value for {key}: {value!r}")
        if not isinstance(value, _CONFIG_TYPES[key]):
            raise ValueError(f"Invalid value for {key}: {value!r}")
        config[key] = value

    if config['timeout'] <= 0:
        raise ValueError(f"timeout must be positive, got {config['timeout']}")

    config['base_url'] = config['base_url'].rstrip('/')
    return config

"""
GfaGraph v0.1.0

Configuration schema for GfaGraph.

Defines the load policies and logging settings with defaults and validation.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml


DUPLICATE_HEADER_POLICIES = ('reject', 'overwrite', 'merge')
DUPLICATE_SEGMENT_POLICIES = ('reject', 'overwrite')
UNRECOGNIZED_RECORD_POLICIES = ('ignore', 'reject')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # GFA Load Policies
    # ========================================================================
    'gfa': {
        'duplicate_header': 'reject',  # second H line: 'reject', 'overwrite', 'merge'
        'duplicate_segment': 'reject',  # repeated S name: 'reject', 'overwrite'
        'unrecognized_record': 'ignore',  # P/C/W/... lines: 'ignore', 'reject'
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'WARNING',
        'format': '%(asctime)s %(name)s %(levelname)s: %(message)s',
    },
}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path) as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ConfigValidationError(f"Configuration root must be a mapping: {config_path}")

        # Deep merge user config into defaults
        config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path):
    """
    Save the default configuration to a YAML file.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    gfa = config.get('gfa', {})
    checks = [
        ('duplicate_header', DUPLICATE_HEADER_POLICIES),
        ('duplicate_segment', DUPLICATE_SEGMENT_POLICIES),
        ('unrecognized_record', UNRECOGNIZED_RECORD_POLICIES),
    ]
    for key, allowed in checks:
        value = gfa.get(key)
        if value not in allowed:
            errors.append(f"Invalid gfa.{key}: {value!r} (expected one of {', '.join(allowed)})")

    level = config.get('logging', {}).get('level')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        errors.append(f"Invalid logging.level: {level!r}")

    return errors


# GfaGraph v0.1.0
# Any usage is subject to this software's license.

"""
Configuration Loader

Loads YAML configuration files for site settings and the default
feature exclusion list.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml

from . import constants


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'settings.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_settings() -> Dict[str, Any]:
    """
    Load site and runtime settings.

    Keys missing from settings.yaml fall back to the defaults in
    techcards.common.constants.

    Returns:
        Dictionary with base_url, sitemap_index_url, cache_ttl_seconds,
        request_timeout, request_interval, max_generated_files, data_dir
        and default_page_format.
    """
    defaults = {
        'base_url': constants.BASE_URL,
        'sitemap_index_url': constants.SITEMAP_INDEX_URL,
        'cache_ttl_seconds': constants.CACHE_TTL_SECONDS,
        'request_timeout': constants.REQUEST_TIMEOUT,
        'request_interval': constants.REQUEST_INTERVAL,
        'max_generated_files': constants.MAX_GENERATED_FILES,
        'data_dir': 'data',
        'default_page_format': 'standard',
    }
    config = load_config('settings.yaml')
    defaults.update(config.get('settings', {}))
    return defaults


def load_excluded_features() -> List[str]:
    """
    Load the feature labels hidden from cards when no selection is given.

    Returns:
        List of terms matched as case-insensitive substrings of attribute labels

    Example:
        ['Głębokość transport', 'Kod dostawcy', 'Kolor', ...]
    """
    config = load_config('excluded_features.yaml')
    return list(config.get('excluded_features', []))

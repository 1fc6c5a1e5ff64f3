"""
Configuration Loader

Loads YAML configuration files for product categories, the storefront
keyword table, and general catalog settings.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


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
        filename: Name of the config file (e.g., 'categories.yaml')

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


def load_categories() -> Dict[str, Dict[str, Any]]:
    """
    Load category configuration.

    Returns:
        Dictionary mapping category key to its label and heuristic keywords

    Example:
        {
            'tech': {'label': 'Tech', 'keywords': ['tech', 'electronic', ...]},
            'home': {'label': 'Home', 'keywords': ['home', 'kitchen', ...]},
            ...
        }
    """
    config = load_config('categories.yaml')
    return config.get('categories', {})


def load_settings() -> Dict[str, Any]:
    """
    Load general catalog settings.

    Returns:
        Dictionary with products_file and fetch_timeout.
    """
    return load_config('settings.yaml')


def get_category_keys(categories: Optional[Dict[str, Dict[str, Any]]] = None) -> List[str]:
    """
    Get the category keys in configured order.

    Args:
        categories: Category dict (if None, loads from config)

    Returns:
        List of lowercase category keys, e.g. ['tech', 'home', 'lifestyle']
    """
    if categories is None:
        categories = load_categories()

    return [key.lower() for key in categories]


def get_category_labels(categories: Optional[Dict[str, Dict[str, Any]]] = None) -> Dict[str, str]:
    """
    Get mapping from category key to display label.

    Falls back to the capitalized key when a category has no label.
    """
    if categories is None:
        categories = load_categories()

    return {
        key.lower(): (entry or {}).get('label') or key.capitalize()
        for key, entry in categories.items()
    }


def build_keyword_table(categories: Optional[Dict[str, Dict[str, Any]]] = None) -> Dict[str, List[str]]:
    """
    Build the heuristic keyword table used by the storefront category filter.

    Args:
        categories: Category dict (if None, loads from config)

    Returns:
        Dictionary mapping lowercase category key to lowercase keywords

    Example:
        {
            'tech': ['tech', 'electronic', 'gadget', 'phone', 'computer', 'laptop'],
            'home': ['home', 'kitchen', 'furniture', 'decor', 'garden'],
            ...
        }
    """
    if categories is None:
        categories = load_categories()

    table = {}
    for key, entry in categories.items():
        keywords = (entry or {}).get('keywords', [])
        table[key.lower()] = [str(keyword).lower() for keyword in keywords]

    return table

"""
Site Configuration Resolution

Merges the user's config.yaml over the built-in defaults. Nested sections
(style, features) are merged key by key, so a user config only needs the keys it
changes.

Examples:
    # No config.yaml: pure defaults
    >>> resolve_site_config(Path("missing.yaml"))
    {'theme': 'modern', 'favicon': '', 'style': {}, 'features': {}}

    # config.yaml containing "theme: classic"
    >>> resolve_site_config(Path("config.yaml"))["theme"]
    'classic'
"""

import copy
from pathlib import Path
from typing import Any, Dict

from omegaconf import OmegaConf

from webcv.contexts.rendering.logger import _log_debug
from webcv.utils.documents import read_structured_document

DEFAULT_THEME = "modern"

DEFAULT_SITE_CONFIG = {
    "theme": DEFAULT_THEME,
    "favicon": "",
    "style": {},
    "features": {},
}


def get_default_config() -> Dict[str, Any]:
    """Fresh copy of the default site configuration."""
    return copy.deepcopy(DEFAULT_SITE_CONFIG)


def resolve_site_config(config_path: Path) -> Dict[str, Any]:
    """
    Load config.yaml (if present) and merge it over the defaults.

    Args:
        config_path: Path to the user's config file

    Returns:
        Complete site configuration as a plain dict

    Raises:
        ValueError: If the config file exists but isn't a mapping
    """
    defaults = OmegaConf.create(get_default_config())

    if not config_path.exists():
        _log_debug(f"No config file at {config_path}; using defaults")
        return OmegaConf.to_container(defaults)

    user_config = read_structured_document(config_path)
    merged = OmegaConf.merge(defaults, OmegaConf.create(user_config))

    config = OmegaConf.to_container(merged, resolve=True)
    if not config.get("theme"):
        config["theme"] = DEFAULT_THEME

    _log_debug(f"Loaded config from {config_path} (theme: {config['theme']})")
    return config

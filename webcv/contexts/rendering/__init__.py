"""
Rendering Context

Responsibilities:
- Loads the resume document and site configuration
- Renders the configured theme to HTML
- Copies stylesheets and local assets into the output directory

Owns: Themes, site output (public/)
Never: Touches scaffold files or the sync state
"""

from webcv.contexts.rendering.assets import copy_asset
from webcv.contexts.rendering.builder import BuildResult, build_site
from webcv.contexts.rendering.config_resolver import resolve_site_config
from webcv.contexts.rendering.exceptions import SiteRenderError, ThemeNotFoundError
from webcv.contexts.rendering.theme_registry import ThemeRegistry

__all__ = [
    "build_site",
    "BuildResult",
    "copy_asset",
    "resolve_site_config",
    "ThemeRegistry",
    "ThemeNotFoundError",
    "SiteRenderError",
]

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, Template, TemplateError, select_autoescape

from webcv.contexts.rendering.exceptions import SiteRenderError, ThemeNotFoundError

load_dotenv()
THEMES_PATH = Path(os.getenv("WEBCV_THEMES_PATH", Path(__file__).parent / "themes"))

TEMPLATE_NAME = "template.html.jinja"
STYLESHEET_NAME = "style.css"
BASE_STYLESHEET_NAME = "base.css"


class ThemeRegistry:
    """
    Registry for loading and caching Jinja2 theme templates.

    Themes are stored in themes/{theme}/ with:
    - template.html.jinja: page template, rendered with `resume` and `config`
    - style.css: theme stylesheet (optional)

    A shared themes/base.css is copied alongside every theme when present.
    """

    def __init__(self, themes_path: Path = None):
        """
        Initialize the theme registry.

        Args:
            themes_path: Base path for theme directories. Defaults to
                         WEBCV_THEMES_PATH or the bundled themes.
        """
        if themes_path is None:
            themes_path = THEMES_PATH

        self.themes_path = Path(themes_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.themes_path)),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def available_themes(self) -> List[str]:
        """Names of theme directories that contain a template."""
        if not self.themes_path.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.themes_path.iterdir()
            if (entry / TEMPLATE_NAME).is_file()
        )

    def get_template(self, theme: str) -> Template:
        """
        Get a theme's template, loading and caching it if necessary.

        Args:
            theme: Name of the theme (e.g., 'modern')

        Returns:
            Jinja2 Template object

        Raises:
            ThemeNotFoundError: If the theme directory or its template doesn't exist
            SiteRenderError: If the template has Jinja2 syntax errors
        """
        # Check cache first
        if theme in self._cache:
            return self._cache[theme]

        if not self.get_theme_dir(theme).is_dir():
            raise ThemeNotFoundError(
                f'Theme "{theme}" not found',
                theme=theme,
                themes_path=self.themes_path,
                available=self.available_themes(),
            )

        template_path = self.get_template_path(theme)
        if not template_path.is_file():
            raise ThemeNotFoundError(
                f'Theme "{theme}" has no {TEMPLATE_NAME}',
                theme=theme,
                themes_path=self.themes_path,
                available=self.available_themes(),
            )

        try:
            template = self.env.get_template(f"{theme}/{TEMPLATE_NAME}")
        except TemplateError as e:
            raise SiteRenderError(
                "Theme template failed to load",
                theme=theme,
                template_path=template_path,
                original_error=e,
            ) from e

        # Cache and return
        self._cache[theme] = template
        return template

    def render(self, theme: str, resume: Dict[str, Any], config: Dict[str, Any]) -> str:
        """
        Render a theme with resume data and site config.

        Raises:
            ThemeNotFoundError: If the theme doesn't exist
            SiteRenderError: If rendering fails
        """
        template = self.get_template(theme)
        try:
            return template.render(resume=resume, config=config)
        except TemplateError as e:
            raise SiteRenderError(
                "Theme template failed to render",
                theme=theme,
                template_path=self.get_template_path(theme),
                original_error=e,
            ) from e

    def get_theme_dir(self, theme: str) -> Path:
        return self.themes_path / theme

    def get_template_path(self, theme: str) -> Path:
        """
        Get the file path for a theme's template.

        Args:
            theme: Name of the theme

        Returns:
            Path to template file
        """
        return self.get_theme_dir(theme) / TEMPLATE_NAME

    def stylesheet_path(self, theme: str) -> Path:
        return self.get_theme_dir(theme) / STYLESHEET_NAME

    def base_stylesheet_path(self) -> Path:
        return self.themes_path / BASE_STYLESHEET_NAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, theme: str) -> bool:
        return theme in self._cache

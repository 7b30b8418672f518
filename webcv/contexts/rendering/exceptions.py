"""Custom exceptions for rendering context with theme references."""

from pathlib import Path
from typing import List, Optional


class ThemeNotFoundError(Exception):
    """
    Exception raised when a configured theme or its template doesn't exist.

    Attributes:
        message: Error description
        theme: Requested theme name
        themes_path: Directory that was searched
        available: Theme names that do exist
    """

    def __init__(
        self,
        message: str,
        theme: Optional[str] = None,
        themes_path: Optional[Path] = None,
        available: Optional[List[str]] = None,
    ):
        self.message = message
        self.theme = theme
        self.themes_path = themes_path
        self.available = available or []

        parts = [message]

        if themes_path:
            parts.append(f"Searched: {themes_path}")

        if self.available:
            parts.append(f"Available themes: {', '.join(self.available)}")

        super().__init__("\n".join(parts))


class SiteRenderError(Exception):
    """
    Exception raised when rendering a theme template fails.

    Attributes:
        message: Error description
        theme: Theme being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        theme: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.theme = theme
        self.template_path = template_path
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if theme and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Theme: {theme}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))

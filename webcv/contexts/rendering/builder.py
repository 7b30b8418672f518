"""
Static Site Build

Reads resume.yaml and config.yaml from a project, renders the configured theme
and writes the site to public/:

    public/index.html   rendered theme template
    public/base.css     shared base stylesheet (if the themes ship one)
    public/style.css    theme stylesheet
    public/assets/      copied local assets (profile photo, favicon)
"""

import copy
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from webcv.contexts.rendering.assets import copy_asset
from webcv.contexts.rendering.config_resolver import resolve_site_config
from webcv.contexts.rendering.exceptions import SiteRenderError, ThemeNotFoundError
from webcv.contexts.rendering.logger import (
    _log_info,
    _log_warning,
    log_build_result,
    log_build_start,
)
from webcv.contexts.rendering.theme_registry import ThemeRegistry
from webcv.utils.documents import read_structured_document

DEFAULT_INPUT_NAME = "resume.yaml"
CONFIG_NAME = "config.yaml"
OUTPUT_DIRNAME = "public"
HTML_NAME = "index.html"

# Resume fields that may hold a profile photo, in priority order
PROFILE_IMAGE_FIELDS = ("image", "photo")


@dataclass
class BuildResult:
    """
    Result of a site build.

    Attributes:
        success: Whether the site was written
        output_dir: Site output directory
        html_path: Path to the written index.html (None if failed)
        theme: Theme used for rendering
        stylesheets: Stylesheets copied into the output
        assets: Asset references resolved for the page
        error: Error message if the build failed
    """

    success: bool
    output_dir: Optional[Path] = None
    html_path: Optional[Path] = None
    theme: Optional[str] = None
    stylesheets: List[Path] = field(default_factory=list)
    assets: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass(frozen=True)
class RenderContext:
    """Values handed to the theme template: resume data plus resolved config."""

    resume: Dict[str, Any]
    config: Dict[str, Any]
    assets: Tuple[str, ...] = ()


def resolve_assets(
    resume: Dict[str, Any],
    config: Dict[str, Any],
    output_dir: Path,
    resume_dir: Path,
    config_dir: Path,
) -> RenderContext:
    """
    Copy local assets into the site and build the render context.

    Relative references are looked up next to the document that holds them:
    the profile photo against resume_dir, the favicon against config_dir.

    The inputs are not modified; rewritten references appear only in the
    returned context.
    """
    resume = copy.deepcopy(resume)
    config = copy.deepcopy(config)
    copied = []

    def _resolve(
        container: Dict[str, Any], key: str, canonical_name: str, base_dir: Path
    ) -> None:
        reference = copy_asset(
            container[key], output_dir, canonical_name=canonical_name, base_dir=base_dir
        )
        if reference != container[key]:
            copied.append(reference)
        container[key] = reference

    basics = resume.get("basics")
    if isinstance(basics, dict):
        for field_name in PROFILE_IMAGE_FIELDS:
            if basics.get(field_name):
                _resolve(basics, field_name, "profile", resume_dir)
                # Themes read the photo from basics.image only
                basics["image"] = basics[field_name]
                break

    if config.get("favicon"):
        _resolve(config, "favicon", "favicon", config_dir)

    return RenderContext(resume=resume, config=config, assets=tuple(copied))


def _copy_stylesheets(registry: ThemeRegistry, theme: str, output_dir: Path) -> List[Path]:
    copied = []

    base_css = registry.base_stylesheet_path()
    if base_css.is_file():
        shutil.copyfile(base_css, output_dir / base_css.name)
        copied.append(output_dir / base_css.name)

    theme_css = registry.stylesheet_path(theme)
    if theme_css.is_file():
        shutil.copyfile(theme_css, output_dir / theme_css.name)
        copied.append(output_dir / theme_css.name)
    else:
        _log_warning(f"No {theme_css.name} found for theme '{theme}'")

    return copied


def build_site(
    input_path: Optional[Path] = None,
    project_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    registry: Optional[ThemeRegistry] = None,
) -> BuildResult:
    """
    Build the static site for a resume.

    Args:
        input_path: Resume document (default: <project_dir>/resume.yaml)
        project_dir: Project directory holding config.yaml (default: cwd)
        output_dir: Where to write the site (default: <project_dir>/public)
        registry: Theme registry (default: bundled themes)

    Returns:
        BuildResult; failures (missing input, unknown theme, template errors)
        are reported in `error` rather than raised
    """
    start_time = time.time()
    project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
    input_path = Path(input_path).resolve() if input_path else project_dir / DEFAULT_INPUT_NAME
    output_dir = Path(output_dir) if output_dir is not None else project_dir / OUTPUT_DIRNAME
    registry = registry or ThemeRegistry()

    log_build_start(input_path, output_dir)

    try:
        resume = read_structured_document(input_path)

        _log_info("Reading configuration...")
        config = resolve_site_config(project_dir / CONFIG_NAME)
        theme = config["theme"]

        # Fail on an unknown theme before anything is written
        registry.get_template(theme)
        output_dir.mkdir(parents=True, exist_ok=True)

        context = resolve_assets(
            resume, config, output_dir, resume_dir=input_path.parent, config_dir=project_dir
        )

        _log_info(f"Compiling template using theme: {theme}...")
        html = registry.render(theme, context.resume, context.config)

        html_path = output_dir / HTML_NAME
        html_path.write_text(html, encoding="utf-8")
        stylesheets = _copy_stylesheets(registry, theme, output_dir)
    except (FileNotFoundError, ValueError, ThemeNotFoundError, SiteRenderError, OSError) as e:
        result = BuildResult(success=False, output_dir=output_dir, error=str(e))
        log_build_result(result, time.time() - start_time)
        return result

    result = BuildResult(
        success=True,
        output_dir=output_dir,
        html_path=html_path,
        theme=theme,
        stylesheets=stylesheets,
        assets=list(context.assets),
    )
    log_build_result(result, time.time() - start_time)
    return result

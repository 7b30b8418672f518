"""
Site asset handling.

Local files referenced from the resume or config (profile photo, favicon) are
copied into the output's assets/ directory; the page then links to the copy.
Remote references are left as they are.
"""

import shutil
from pathlib import Path
from typing import Any, Optional

from webcv.contexts.rendering.logger import _log_debug, _log_warning

ASSETS_DIRNAME = "assets"
REMOTE_PREFIXES = ("http://", "https://", "//", "data:")


def is_remote(reference: str) -> bool:
    return reference.lower().startswith(REMOTE_PREFIXES)


def copy_asset(
    source: Any,
    output_dir: Path,
    canonical_name: Optional[str] = None,
    base_dir: Optional[Path] = None,
) -> Any:
    """
    Copy a local asset into the site and return the reference to use in HTML.

    Args:
        source: Asset reference as written by the user (path or URL)
        output_dir: Site output directory
        canonical_name: Stem to store the asset under (keeps the original suffix)
        base_dir: Directory relative paths are resolved against (default: cwd)

    Returns:
        "assets/<name>" for a copied local file; the original value for empty,
        non-string, remote or missing references
    """
    if not isinstance(source, str) or not source.strip() or is_remote(source):
        return source

    source_path = Path(source).expanduser()
    if not source_path.is_absolute() and base_dir is not None:
        source_path = Path(base_dir) / source_path

    if not source_path.is_file():
        _log_warning(f"Asset not found, linking as-is: {source}")
        return source

    name = f"{canonical_name}{source_path.suffix}" if canonical_name else source_path.name
    assets_dir = Path(output_dir) / ASSETS_DIRNAME
    assets_dir.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source_path, assets_dir / name)

    _log_debug(f"Copied asset {source_path} -> {assets_dir / name}")
    return f"{ASSETS_DIRNAME}/{name}"

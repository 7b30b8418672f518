"""
Rendering context logger.

Provides logging interface for rendering context with automatic [build] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from webcv.utils.logger import default_log_dir
from webcv.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[build]"


def setup_rendering_logger(
    input_path: Path, log_dir: Optional[Path] = None, verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for rendering context.

    Args:
        input_path: Resume document being built (recorded in provenance)
        log_dir: Directory for this session (defaults to WEBCV_LOGS_PATH, if set)
        verbose: Show debug messages on the console

    Returns:
        Path to log file, or None when logging to console only

    Example:
        from webcv.contexts.rendering.logger import setup_rendering_logger, _log_info

        setup_rendering_logger(Path("resume.yaml"))
        _log_info("Starting build...")
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir if log_dir is not None else default_log_dir(),
        extra_provenance={"Input": input_path},
        verbose=verbose,
    )


# Wrapper functions with automatic [build] prefix


def _log_info(message: str) -> None:
    """Log info message with [build] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [build] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [build] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [build] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [build] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(input_path: Path, output_dir: Path) -> None:
    """Log start of a site build."""
    _log_info(f"Reading resume data from {input_path}")
    _log_debug(f"  Output: {output_dir}")


def log_build_result(result, elapsed_time: float) -> None:  # BuildResult
    """Log site build result."""
    if result.success:
        _log_success(f"Build complete with theme '{result.theme}' ({elapsed_time:.2f}s)")
        _log_info(f"  Open {result.html_path} to view.")
        for stylesheet in result.stylesheets:
            _log_debug(f"  Stylesheet: {stylesheet}")
        for asset in result.assets:
            _log_debug(f"  Asset: {asset}")
    else:
        _log_error(f"Build failed ({elapsed_time:.2f}s)")
        if result.error:
            logger.opt(raw=True).error(f"{result.error}\n")

"""
Scaffolding context logger.

Provides logging interface for scaffolding context with automatic [scaffold] prefix.
All scaffolding modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from webcv.utils.logger import default_log_dir
from webcv.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[scaffold]"


def setup_scaffolding_logger(
    project_dir: Path, log_dir: Optional[Path] = None, verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for scaffolding context.

    Args:
        project_dir: Project being scaffolded (recorded in provenance)
        log_dir: Directory for this session (defaults to WEBCV_LOGS_PATH, if set)
        verbose: Show debug messages on the console

    Returns:
        Path to log file, or None when logging to console only
    """
    return _setup_logger(
        context_name="scaffold",
        log_dir=log_dir if log_dir is not None else default_log_dir(),
        extra_provenance={"Project": project_dir},
        verbose=verbose,
    )


# Wrapper functions with automatic [scaffold] prefix


def _log_info(message: str) -> None:
    """Log info message with [scaffold] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [scaffold] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [scaffold] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [scaffold] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [scaffold] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scaffolding-specific logging helpers


def log_run_start(project_dir: Path, state_path: Path, num_files: int) -> None:
    """Log start of a scaffold sync."""
    _log_info(f"Syncing {num_files} scaffold files into {project_dir}")
    _log_debug(f"  State file: {state_path}")


def log_file_outcome(outcome) -> None:  # ReconcileOutcome
    """Log what happened to a single managed file."""
    action = outcome.action.value if outcome.action else "error"
    if outcome.error:
        _log_error(f"error: {outcome.destination} ({outcome.error})")
    elif action == "create":
        _log_success(f"created: {outcome.destination}")
    elif action == "skip-current":
        _log_info(f"up to date: {outcome.destination}")
    elif action == "skip-local-mod":
        _log_warning(f"skipped: {outcome.destination} has local changes")
    elif outcome.changed:
        _log_success(f"updated: {outcome.destination}")
        if outcome.backup_path:
            _log_info(f"  Backup: {outcome.backup_path}")
    else:
        _log_warning(f"kept: {outcome.destination} (update declined)")

    _log_debug(f"  Shipped fingerprint: {outcome.shipped_fingerprint}")


def log_state_error(message: str) -> None:
    """Log a sync state write failure."""
    _log_error(message)
    _log_error("  Unchanged files may be offered for update again on the next run")


def log_run_summary(result, elapsed_time: float) -> None:  # ScaffoldRunResult
    """Log summary of a finished scaffold sync."""
    errors = [outcome for outcome in result.outcomes if outcome.error]
    if result.state_error:
        _log_error(
            f"Sync finished without saving state ({result.created_or_updated} files created "
            f"or updated, {elapsed_time:.2f}s)"
        )
        return
    if errors:
        _log_error(
            f"Sync finished with {len(errors)} errors "
            f"({result.created_or_updated} files created or updated, {elapsed_time:.2f}s)"
        )
    else:
        _log_success(
            f"Sync complete ({result.created_or_updated} files created or updated, "
            f"{elapsed_time:.2f}s)"
        )
    _log_debug(f"  State saved: {result.state_path}")

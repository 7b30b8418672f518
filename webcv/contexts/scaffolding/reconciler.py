"""
Scaffold Reconciliation

Decides, for one managed scaffold file, whether to create it, leave it alone, or
offer to overwrite it, by comparing three fingerprints:

    cur_ship   shipped template now
    last_ship  shipped template at the last sync (from the sync state)
    cur_user   the user's current file in the project

Decision table:

    cur_user absent                  -> create
    cur_user == cur_ship             -> skip-current
    cur_ship == last_ship            -> skip-local-mod (user edited an unchanged template)
    otherwise                        -> prompt-update (template changed under a local edit)

Deciding is pure (decide); touching the filesystem happens in apply_decision.
Whatever the branch, the caller records cur_ship as the new baseline.
"""

import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from webcv.contexts.scaffolding.exceptions import ScaffoldConfigurationError, ScaffoldFileError
from webcv.contexts.scaffolding.managed_files import SHIPPED_PATH, ManagedFile
from webcv.contexts.scaffolding.resolver import Confirm
from webcv.utils.fingerprint import ABSENT, Fingerprint, fingerprint

BACKUP_SUFFIX = ".bak"


class ScaffoldAction(Enum):
    CREATE = "create"
    SKIP_CURRENT = "skip-current"
    SKIP_LOCAL_MOD = "skip-local-mod"
    PROMPT_UPDATE = "prompt-update"


@dataclass(frozen=True)
class DecisionContext:
    """
    Everything needed to reconcile one managed file, captured once per file.

    Attributes:
        managed_file: The scaffold file being reconciled
        source_path: Resolved shipped template path
        destination_path: Resolved path in the user's project
        cur_ship: Fingerprint of the shipped template now
        last_ship: Shipped fingerprint recorded at the last sync (ABSENT if never synced)
        cur_user: Fingerprint of the user's file (ABSENT if it doesn't exist)
    """

    managed_file: ManagedFile
    source_path: Path
    destination_path: Path
    cur_ship: Fingerprint
    last_ship: Fingerprint
    cur_user: Fingerprint


@dataclass
class ReconcileOutcome:
    """
    Result of reconciling one managed file.

    Attributes:
        file_id: Managed file identifier
        destination: Destination path relative to the project (for display)
        action: Action the policy picked (None if the file errored before deciding)
        shipped_fingerprint: Fingerprint to record in the sync state (None on error)
        changed: Whether the destination file was written
        backup_path: Backup of the previous destination content, if one was made
        error: Error message if processing this file failed
    """

    file_id: str
    destination: str
    action: Optional[ScaffoldAction]
    shipped_fingerprint: Fingerprint
    changed: bool = False
    backup_path: Optional[Path] = None
    error: Optional[str] = None


def backup_path_for(destination_path: Path) -> Path:
    """Backup location for a destination file (suffix appended, never chained)."""
    return destination_path.with_name(destination_path.name + BACKUP_SUFFIX)


def build_context(
    managed_file: ManagedFile,
    project_dir: Path,
    last_ship: Fingerprint,
    shipped_dir: Path = SHIPPED_PATH,
) -> DecisionContext:
    """
    Fingerprint the shipped template and the user's file for one managed file.

    Raises:
        ScaffoldConfigurationError: If the shipped template is missing or unreadable
        ScaffoldFileError: If the destination exists but cannot be read
    """
    source_path = managed_file.source_path(shipped_dir)
    destination_path = managed_file.destination_path(project_dir)

    try:
        cur_ship = fingerprint(source_path)
    except OSError as e:
        raise ScaffoldConfigurationError(
            "Shipped scaffold template is unreadable",
            file_id=managed_file.file_id,
            source_path=source_path,
            original_error=e,
        ) from e

    if cur_ship is ABSENT:
        raise ScaffoldConfigurationError(
            "Shipped scaffold template is missing",
            file_id=managed_file.file_id,
            source_path=source_path,
        )

    try:
        cur_user = fingerprint(destination_path)
    except OSError as e:
        raise ScaffoldFileError(
            f"Cannot read {managed_file.destination}",
            file_id=managed_file.file_id,
            destination_path=destination_path,
            original_error=e,
        ) from e

    return DecisionContext(
        managed_file=managed_file,
        source_path=source_path,
        destination_path=destination_path,
        cur_ship=cur_ship,
        last_ship=last_ship,
        cur_user=cur_user,
    )


def decide(context: DecisionContext) -> ScaffoldAction:
    """Pick the action for a managed file from its three fingerprints."""
    if context.cur_user is ABSENT:
        return ScaffoldAction.CREATE
    if context.cur_ship == context.cur_user:
        return ScaffoldAction.SKIP_CURRENT
    if context.cur_ship == context.last_ship:
        return ScaffoldAction.SKIP_LOCAL_MOD
    return ScaffoldAction.PROMPT_UPDATE


def _copy_shipped(context: DecisionContext) -> None:
    try:
        context.destination_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(context.source_path, context.destination_path)
    except OSError as e:
        raise ScaffoldFileError(
            f"Cannot write {context.managed_file.destination}",
            file_id=context.managed_file.file_id,
            destination_path=context.destination_path,
            original_error=e,
        ) from e


def _backup_destination(context: DecisionContext) -> Path:
    backup_path = backup_path_for(context.destination_path)
    try:
        shutil.copy2(context.destination_path, backup_path)
    except OSError as e:
        raise ScaffoldFileError(
            f"Cannot back up {context.managed_file.destination}; left it untouched",
            file_id=context.managed_file.file_id,
            destination_path=context.destination_path,
            original_error=e,
        ) from e
    return backup_path


def update_prompt(context: DecisionContext) -> str:
    """Question shown to the operator for a prompt-update."""
    backup_name = backup_path_for(context.destination_path).name
    return (
        f"The webcv template for {context.managed_file.destination} has changed, "
        f"but your copy has local edits. Overwrite it? (backup: {backup_name})"
    )


def apply_decision(
    context: DecisionContext, action: ScaffoldAction, confirm: Confirm
) -> ReconcileOutcome:
    """
    Carry out an action against the filesystem.

    Only PROMPT_UPDATE consults `confirm`, exactly once. An accepted update
    backs up the current destination before copying the shipped file over it;
    if the backup fails the destination is not touched.

    Raises:
        ScaffoldFileError: If backing up or writing the destination fails
    """
    outcome = ReconcileOutcome(
        file_id=context.managed_file.file_id,
        destination=context.managed_file.destination,
        action=action,
        shipped_fingerprint=context.cur_ship,
    )

    if action is ScaffoldAction.CREATE:
        _copy_shipped(context)
        outcome.changed = True
    elif action is ScaffoldAction.PROMPT_UPDATE and confirm(update_prompt(context)):
        outcome.backup_path = _backup_destination(context)
        _copy_shipped(context)
        outcome.changed = True

    return outcome


def reconcile_file(
    managed_file: ManagedFile,
    project_dir: Path,
    last_ship: Fingerprint,
    confirm: Confirm,
    shipped_dir: Path = SHIPPED_PATH,
) -> ReconcileOutcome:
    """
    Reconcile one managed file: fingerprint, decide, ask if needed, apply.

    Args:
        managed_file: Scaffold file to reconcile
        project_dir: User's project directory
        last_ship: Shipped fingerprint from the previous sync (ABSENT if never synced)
        confirm: Yes/no capability used for prompt-update
        shipped_dir: Directory holding the shipped templates

    Returns:
        ReconcileOutcome whose shipped_fingerprint becomes the new sync baseline

    Raises:
        ScaffoldConfigurationError: If the shipped template is missing or unreadable
        ScaffoldFileError: If the destination cannot be read, backed up or written
    """
    context = build_context(managed_file, project_dir, last_ship, shipped_dir)
    return apply_decision(context, decide(context), confirm)

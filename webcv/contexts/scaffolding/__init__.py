"""
Scaffolding Context

Responsibilities:
- Owns the fixed set of scaffold files webcv installs into a project
- Fingerprints shipped templates and user copies
- Remembers which template version was last synced (sync state)
- Creates, skips or (with confirmation) upgrades each scaffold file

Owns: Managed file set, sync state file, backups of overwritten files
Never: Renders resumes or reads resume content
"""

from webcv.contexts.scaffolding.exceptions import ScaffoldConfigurationError, ScaffoldFileError
from webcv.contexts.scaffolding.managed_files import MANAGED_FILES, SHIPPED_PATH, ManagedFile
from webcv.contexts.scaffolding.orchestrator import ScaffoldRunResult, sync_scaffold
from webcv.contexts.scaffolding.reconciler import (
    BACKUP_SUFFIX,
    DecisionContext,
    ReconcileOutcome,
    ScaffoldAction,
    decide,
    reconcile_file,
)
from webcv.contexts.scaffolding.resolver import Confirm, ScriptedConfirm, confirm

__all__ = [
    # Orchestration
    "sync_scaffold",
    "ScaffoldRunResult",
    # Reconciliation
    "reconcile_file",
    "decide",
    "DecisionContext",
    "ReconcileOutcome",
    "ScaffoldAction",
    "BACKUP_SUFFIX",
    # Managed files
    "ManagedFile",
    "MANAGED_FILES",
    "SHIPPED_PATH",
    # Operator interaction
    "Confirm",
    "ScriptedConfirm",
    "confirm",
    # Errors
    "ScaffoldConfigurationError",
    "ScaffoldFileError",
]

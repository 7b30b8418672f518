"""
Scaffold Sync Orchestration

Runs the reconciler over every managed file, in declaration order, and persists
the updated sync state once at the end.

Error policy:
- ScaffoldConfigurationError (broken install) propagates and aborts the run;
  the sync state is not written.
- ScaffoldFileError (one destination unreadable/unwritable) is reported, that
  file's state entry is dropped so the next run decides it from scratch, and
  the remaining files are still processed.
- A sync state that cannot be written is reported on the result; the files
  written during the run are kept.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from webcv.contexts.scaffolding.exceptions import ScaffoldFileError
from webcv.contexts.scaffolding.logger import (
    log_file_outcome,
    log_run_start,
    log_state_error,
    log_run_summary,
)
from webcv.contexts.scaffolding.managed_files import MANAGED_FILES, SHIPPED_PATH, ManagedFile
from webcv.contexts.scaffolding.reconciler import ReconcileOutcome, reconcile_file
from webcv.contexts.scaffolding.resolver import Confirm, confirm as console_confirm
from webcv.contexts.scaffolding.sync_state import (
    SyncState,
    load_sync_state,
    save_sync_state,
    state_file_path,
)
from webcv.utils.fingerprint import ABSENT


@dataclass
class ScaffoldRunResult:
    """
    Result of a scaffold sync.

    Attributes:
        created_or_updated: Number of destination files written (summary only)
        outcomes: Per-file outcomes in processing order
        state: Sync state as persisted at the end of the run
        state_path: Where the sync state was written
        state_error: Why the sync state could not be written (None if it was)
    """

    created_or_updated: int = 0
    outcomes: List[ReconcileOutcome] = field(default_factory=list)
    state: SyncState = field(default_factory=dict)
    state_path: Optional[Path] = None
    state_error: Optional[str] = None

    @property
    def errors(self) -> List[ReconcileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.error]

    @property
    def success(self) -> bool:
        return not self.errors and self.state_error is None


def sync_scaffold(
    project_dir: Path,
    managed_files: Sequence[ManagedFile] = MANAGED_FILES,
    confirm: Confirm = console_confirm,
    shipped_dir: Path = SHIPPED_PATH,
    state_path: Optional[Path] = None,
) -> ScaffoldRunResult:
    """
    Create or safely upgrade the scaffold files in a project.

    Args:
        project_dir: User's project directory
        managed_files: Files to reconcile, processed in order
        confirm: Yes/no capability for files whose template changed under local edits
        shipped_dir: Directory holding the shipped templates
        state_path: Sync state location (defaults to the project's state file)

    Returns:
        ScaffoldRunResult with counts, per-file outcomes and the persisted state

    Raises:
        ScaffoldConfigurationError: If a shipped template is missing or unreadable
    """
    project_dir = Path(project_dir)
    if state_path is None:
        state_path = state_file_path(project_dir)

    start_time = time.time()
    log_run_start(project_dir, state_path, len(managed_files))

    previous_state = load_sync_state(state_path)
    # Entries for files outside this run are carried over untouched
    new_state: SyncState = dict(previous_state)
    result = ScaffoldRunResult(state_path=state_path)

    for managed_file in managed_files:
        last_ship = previous_state.get(managed_file.file_id, ABSENT)
        try:
            outcome = reconcile_file(
                managed_file,
                project_dir,
                last_ship=last_ship,
                confirm=confirm,
                shipped_dir=shipped_dir,
            )
        except ScaffoldFileError as e:
            outcome = ReconcileOutcome(
                file_id=managed_file.file_id,
                destination=managed_file.destination,
                action=None,
                shipped_fingerprint=ABSENT,
                error=f"{e.message}: {e.original_error}" if e.original_error else e.message,
            )
            new_state.pop(managed_file.file_id, None)
        else:
            new_state[managed_file.file_id] = outcome.shipped_fingerprint
            if outcome.changed:
                result.created_or_updated += 1

        result.outcomes.append(outcome)
        log_file_outcome(outcome)

    try:
        save_sync_state(state_path, new_state)
    except OSError as e:
        # Files already written stay; the next run re-derives their decisions
        result.state_error = f"Cannot write sync state {state_path}: {e}"
        log_state_error(result.state_error)
    else:
        result.state = new_state

    log_run_summary(result, time.time() - start_time)
    return result

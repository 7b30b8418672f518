"""
Scaffold Sync State

Remembers, across runs, what each shipped scaffold template looked like the last
time it was synced into the project. Stored as a single JSON object at
.webcv/scaffold_state.json (relative to the project directory).

Schema:
    {"<file_id>": "<fingerprint of the shipped template>", ...}

Only shipped-template fingerprints are stored. Whether the user changed their copy
is recomputed on every run.

Usage:
    from webcv.contexts.scaffolding.sync_state import load_sync_state, save_sync_state

    state = load_sync_state(state_path)   # {} if missing or unreadable
    state["workflow"] = "sha256:..."
    save_sync_state(state_path, state)    # single atomic write
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from webcv.contexts.scaffolding.logger import _log_debug, _log_warning

load_dotenv()
STATE_FILE = Path(os.getenv("WEBCV_STATE_FILE", ".webcv/scaffold_state.json"))

SyncState = Dict[str, str]


def state_file_path(project_dir: Path) -> Path:
    """Location of the sync state file for a project."""
    return Path(project_dir) / STATE_FILE


def load_sync_state(state_path: Path) -> SyncState:
    """
    Load the sync state mapping.

    A missing, unreadable or malformed state file is treated as "no prior state":
    the worst case is an extra prompt, never lost data.

    Args:
        state_path: Path to the state file

    Returns:
        Mapping of managed file id to shipped-template fingerprint
    """
    if not state_path.exists():
        return {}

    try:
        with open(state_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        _log_warning(f"Ignoring unreadable sync state {state_path}: {e}")
        return {}

    if not isinstance(data, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    ):
        _log_warning(f"Ignoring malformed sync state {state_path}")
        return {}

    _log_debug(f"Loaded sync state for {len(data)} files from {state_path}")
    return data


def save_sync_state(state_path: Path, state: SyncState) -> None:
    """
    Write the sync state mapping in one atomic step.

    Writes to a temp file next to the state file, then moves it into place, so
    an interrupted write never leaves a half-written state file behind.

    Args:
        state_path: Path to the state file
        state: Mapping of managed file id to shipped-template fingerprint
    """
    state_path.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        prefix=f".{state_path.name}.", suffix=".tmp", dir=state_path.parent, text=True
    )
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(state, f, indent=2, sort_keys=True)
            f.write("\n")

        # Only overwrite original if write succeeded
        shutil.move(temp_path, state_path)
    except Exception:
        # Clean up temp file if write failed
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise

    _log_debug(f"Saved sync state for {len(state)} files to {state_path}")

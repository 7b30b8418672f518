"""
Managed scaffold files.

The fixed set of files `webcv init` installs into a user's project. This is the
installer's own scaffold, not user configuration: each entry maps a shipped
template (relative to SHIPPED_PATH) to a destination (relative to the project).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

SHIPPED_PATH = Path(__file__).parent / "shipped"


@dataclass(frozen=True)
class ManagedFile:
    """
    A scaffold file owned by webcv.

    Attributes:
        file_id: Stable identifier, used as the sync state key
        source: Shipped template path, relative to the shipped files directory
        destination: Destination path, relative to the user's project directory
    """

    file_id: str
    source: str
    destination: str

    def source_path(self, shipped_dir: Path = SHIPPED_PATH) -> Path:
        return Path(shipped_dir) / self.source

    def destination_path(self, project_dir: Path) -> Path:
        return Path(project_dir) / self.destination


# Declaration order is processing order
MANAGED_FILES: Tuple[ManagedFile, ...] = (
    ManagedFile("resume", "resume.yaml", "resume.yaml"),
    ManagedFile("config", "config.yaml", "config.yaml"),
    ManagedFile("gitignore", "gitignore", ".gitignore"),
    ManagedFile("workflow", "deploy.yml", ".github/workflows/deploy.yml"),
)

"""Custom exceptions for scaffolding context with file references."""

from pathlib import Path
from typing import Optional


class ScaffoldConfigurationError(Exception):
    """
    Exception raised when a shipped scaffold file is missing or unreadable.

    Indicates a broken install rather than a problem in the user's project, so
    it aborts the whole run.

    Attributes:
        message: Error description
        file_id: Managed file identifier (e.g., 'workflow')
        source_path: Shipped template path that could not be used
        original_error: The underlying OSError, if any
    """

    def __init__(
        self,
        message: str,
        file_id: Optional[str] = None,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.file_id = file_id
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if file_id and source_path:
            parts.append(f"\nManaged file: {file_id}")
            parts.append(f"Shipped template: {source_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        parts.append("\nThe webcv installation looks incomplete; try reinstalling it.")

        super().__init__("\n".join(parts))


class ScaffoldFileError(Exception):
    """
    Exception raised when reading, backing up or writing a destination file fails.

    Scoped to a single managed file: the run reports it and moves on.

    Attributes:
        message: Error description
        file_id: Managed file identifier
        destination_path: Destination path in the user's project
        original_error: The underlying OSError
    """

    def __init__(
        self,
        message: str,
        file_id: Optional[str] = None,
        destination_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.file_id = file_id
        self.destination_path = destination_path
        self.original_error = original_error

        parts = [message]

        if destination_path:
            parts.append(f"Destination: {destination_path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))

"""
Content fingerprints for scaffold files.

A fingerprint is a digest of a file's bytes, so two files with identical content
always compare equal. A missing file has no fingerprint: fingerprint() returns
ABSENT (None) instead of raising.
"""

import hashlib
from pathlib import Path
from typing import Optional

Fingerprint = Optional[str]

ABSENT: Fingerprint = None

ALGORITHM = "sha256"
CHUNK_SIZE = 64 * 1024


def fingerprint(path: Path) -> Fingerprint:
    """
    Compute the fingerprint of a file.

    Args:
        path: File to fingerprint

    Returns:
        "sha256:<hexdigest>" of the file's bytes, or ABSENT if the file does not exist

    Raises:
        OSError: If the file exists but cannot be read (permission denied, directory, ...)
    """
    path = Path(path)
    if not path.exists():
        return ABSENT

    digest = hashlib.new(ALGORITHM)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)

    return f"{ALGORITHM}:{digest.hexdigest()}"


def is_absent(value: Fingerprint) -> bool:
    """Check whether a fingerprint is the ABSENT sentinel."""
    return value is ABSENT

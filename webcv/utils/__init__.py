"""
Shared utilities for webcv.

Common functionality used across contexts:
- File fingerprints
- Structured document loading
- Logger setup
"""

from webcv.utils.documents import read_structured_document
from webcv.utils.fingerprint import ABSENT, Fingerprint, fingerprint

__all__ = ["ABSENT", "Fingerprint", "fingerprint", "read_structured_document"]

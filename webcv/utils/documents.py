"""Structured document loading (YAML, and JSON as a YAML subset)."""

from pathlib import Path
from typing import Any, Dict

from omegaconf import OmegaConf
from omegaconf.errors import GrammarParseError

INTERPOLATION_HINT = (
    "Text containing '${' must be a complete '${name}' reference; "
    "reword or remove a stray '${'"
)


def read_structured_document(path: Path) -> Dict[str, Any]:
    """
    Load a YAML/JSON document into plain Python containers.

    Args:
        path: Document to load

    Returns:
        Document contents as a dict (empty dict for an empty document)

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document cannot be parsed (including text with an
            unbalanced '${') or its top level is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        loaded = OmegaConf.load(path)
    except GrammarParseError as e:
        raise ValueError(f"Cannot parse {path}: {e}\n\n{INTERPOLATION_HINT}") from e
    except Exception as e:
        raise ValueError(f"Cannot parse {path}: {e}") from e

    if not OmegaConf.is_dict(loaded):
        raise ValueError(f"Expected a mapping at the top level of {path}")

    # resolve=False keeps literal "${...}" text in resume content intact
    return OmegaConf.to_container(loaded, resolve=False)

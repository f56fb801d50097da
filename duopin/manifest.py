"""
Manifest Loading
================

Reads the resolved manifest written by ``duo`` (``components/duo.json``).
Only the keys are interpreted; per-entry metadata is passed through untouched.
"""

import json
from pathlib import Path
from typing import Any, Dict

from .errors import MalformedManifestError, MissingManifestError
from .logger import get_logger

logger = get_logger(__name__)


def parse_manifest(raw: str, path: str = "<string>") -> Dict[str, Any]:
    """
    Parse manifest JSON text.

    Raises:
        MalformedManifestError: If the text is not a JSON object
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedManifestError(
            f"Invalid JSON in manifest {path}: {str(e)}", path=path
        ) from e

    if not isinstance(payload, dict):
        raise MalformedManifestError(
            f"Manifest {path} must be a JSON object, got {type(payload).__name__}",
            path=path,
        )
    return payload


def load_manifest(path: Path, display_name: str = "") -> Dict[str, Any]:
    """
    Load the resolved manifest from disk.

    Args:
        path: Location of duo.json
        display_name: Name used in diagnostics (defaults to the path)

    Returns:
        Mapping from component path to resolution metadata

    Raises:
        MissingManifestError: If the manifest does not exist
        MalformedManifestError: If it cannot be read or parsed
    """
    name = display_name or str(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MissingManifestError(
            f"unable to locate {name}: you must run `duo` before running `duo pin`.",
            path=str(path),
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedManifestError(f"Unable to read {name}: {str(e)}", path=str(path)) from e

    manifest = parse_manifest(raw, name)
    logger.debug("Loaded manifest", path=path, entries=len(manifest))
    return manifest


__all__ = ["load_manifest", "parse_manifest"]

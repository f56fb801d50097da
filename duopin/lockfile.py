"""
Lockfile Merge and Write
========================

The lockfile (``component.json``) is owned by the user's project. A pin run
only replaces its ``dependencies`` field; every other field survives
unchanged and in its original order.

Writes go to a sibling ``.tmp`` file which is then renamed over the target,
so a failed write never truncates a previously valid lockfile.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_INDENT, DEPENDENCIES_FIELD, LOCKFILE_TMP_SUFFIX
from .errors import MalformedLockfileError, WriteFailureError
from .logger import get_logger

logger = get_logger(__name__)


def read_lockfile(path: Path) -> Optional[Dict[str, Any]]:
    """
    Read an existing lockfile.

    Returns:
        The parsed document, or None if no lockfile exists at ``path``

    Raises:
        MalformedLockfileError: If the file cannot be read or is not a JSON object
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedLockfileError(
            f"Unable to read {path.name}: {str(e)}", path=str(path)
        ) from e

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedLockfileError(
            f"Refusing to merge into {path.name}: invalid JSON ({str(e)})",
            path=str(path),
        ) from e

    if not isinstance(document, dict):
        raise MalformedLockfileError(
            f"Refusing to merge into {path.name}: expected a JSON object, "
            f"got {type(document).__name__}",
            path=str(path),
        )
    return document


def merge_documents(
    existing: Optional[Mapping[str, Any]], dependencies: Mapping[str, str]
) -> Dict[str, Any]:
    """
    Replace the ``dependencies`` field of ``existing`` with ``dependencies``.

    ``existing`` is not mutated. The replacement is whole, not a deep merge:
    components missing from ``dependencies`` disappear from the result.
    """
    if existing is None:
        return {DEPENDENCIES_FIELD: dict(dependencies)}

    merged = dict(existing)
    merged[DEPENDENCIES_FIELD] = dict(dependencies)
    return merged


def merge_lockfile(dependencies: Mapping[str, str], path: Path) -> Dict[str, Any]:
    """
    Merge pinned dependencies into the lockfile at ``path`` (if any).

    Raises:
        MalformedLockfileError: If an existing lockfile cannot be parsed
    """
    existing = read_lockfile(path)
    if existing is not None:
        logger.debug("Merging lockfile with new dependencies", path=path)
    return merge_documents(existing, dependencies)


def serialize_lockfile(document: Mapping[str, Any], indent: int = DEFAULT_INDENT) -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


def write_lockfile(
    document: Mapping[str, Any], path: Path, indent: int = DEFAULT_INDENT
) -> Path:
    """
    Atomically persist the lockfile.

    Raises:
        WriteFailureError: If the document cannot be serialized or written
    """
    tmp_path = path.with_name(path.name + LOCKFILE_TMP_SUFFIX)
    try:
        content = serialize_lockfile(document, indent)
        tmp_path.write_text(content, encoding="utf-8")
        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as e:
        tmp_path.unlink(missing_ok=True)
        raise WriteFailureError(
            f"Failed to write {path.name}: {str(e)}", path=str(path)
        ) from e

    logger.debug("Wrote lockfile", path=path, bytes=len(content.encode("utf-8")))
    return path


__all__ = [
    "read_lockfile",
    "merge_documents",
    "merge_lockfile",
    "serialize_lockfile",
    "write_lockfile",
]

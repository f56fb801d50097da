"""
Pin Reduction
=============

Reduces a resolved manifest to one pinned version per remote component.

Policy is first-wins: the first occurrence of a component in the manifest's
iteration order is pinned; every later occurrence is reported as a
duplicate and ignored, whether or not its version differs. No semantic
version comparison takes place.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .constants import REMOTE_PREFIX
from .identifier import DependencyIdentifier, parse_identifier
from .logger import get_logger
from .reporter import NullReporter, Reporter

logger = get_logger(__name__)


@dataclass(frozen=True)
class DuplicateRecord:
    """A later manifest entry for an already pinned component."""

    component: str
    version: str
    pinned_version: str
    key: str

    @property
    def conflicting(self) -> bool:
        """True when the ignored version differs from the pinned one."""
        return self.version != self.pinned_version


@dataclass
class PinResult:
    """Output of reduce_pins."""

    # component -> version, in first-seen order
    pins: Dict[str, str] = field(default_factory=dict)

    duplicates: List[DuplicateRecord] = field(default_factory=list)

    # manifest keys filtered out as local components
    skipped: List[str] = field(default_factory=list)


def is_remote(key: str, prefix: str = REMOTE_PREFIX) -> bool:
    """Whether a manifest key refers to a remote (installed) component."""
    return key.startswith(prefix)


def reduce_pins(
    manifest: Mapping[str, Any],
    prefix: str = REMOTE_PREFIX,
    reporter: Optional[Reporter] = None,
) -> PinResult:
    """
    Reduce manifest entries into a first-wins PinnedMap.

    Args:
        manifest: Resolved manifest, key -> opaque metadata
        prefix: Keys starting with this prefix are eligible for pinning
        reporter: Receives one ``pin`` or ``dupe`` event per remote entry

    Returns:
        PinResult with pins, duplicates and skipped local keys

    Raises:
        MalformedIdentifierError: If a remote key cannot be parsed
    """
    reporter = reporter or NullReporter()
    result = PinResult()

    for key in manifest:
        if not is_remote(key, prefix):
            logger.debug("Skipping local component", component=key)
            result.skipped.append(key)
            continue

        parsed: DependencyIdentifier = parse_identifier(key)
        pinned = result.pins.get(parsed.component)

        if pinned is None:
            result.pins[parsed.component] = parsed.version
            reporter.pin(str(parsed))
        else:
            result.duplicates.append(
                DuplicateRecord(
                    component=parsed.component,
                    version=parsed.version,
                    pinned_version=pinned,
                    key=key,
                )
            )
            reporter.dupe(str(parsed))

    logger.debug(
        "Reduced manifest",
        entries=len(manifest),
        pinned=len(result.pins),
        duplicates=len(result.duplicates),
        skipped=len(result.skipped),
    )
    return result


__all__ = ["DuplicateRecord", "PinResult", "is_remote", "reduce_pins"]

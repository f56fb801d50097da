"""Canonical ordering of pinned dependencies for stable lockfile diffs."""

from typing import Dict, List, Mapping, Tuple


def sort_pins(pins: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Return ``(component, version)`` pairs ordered by component code points."""
    return sorted(pins.items(), key=lambda item: item[0])


def canonical_dependencies(pins: Mapping[str, str]) -> Dict[str, str]:
    """Build the insertion-ordered ``dependencies`` mapping written to the lockfile."""
    return dict(sort_pins(pins))


__all__ = ["sort_pins", "canonical_dependencies"]

"""
Identifier Parsing
==================

Turns a resolved manifest key such as::

    components/acme-my-lib@2.0.0/index.js

into a DependencyIdentifier ``acme/my-lib`` at ``2.0.0``.

The owner is always the first hyphen-delimited token of the slug; any
further hyphens belong to the name. Owners therefore never contain hyphens.
"""

from dataclasses import dataclass

from .errors import MalformedIdentifierError


@dataclass(frozen=True)
class DependencyIdentifier:
    """
    A parsed remote dependency.

    Attributes:
        owner: Repository owner (first slug token)
        name: Repository name (remaining slug tokens joined with ``-``)
        version: Resolved version or ref, exactly as it appears in the key
    """

    owner: str
    name: str
    version: str

    @property
    def component(self) -> str:
        """Canonical ``owner/name`` path used as the lockfile key."""
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return f"{self.component}@{self.version}"


def parse_identifier(key: str) -> DependencyIdentifier:
    """
    Parse a manifest key into a DependencyIdentifier.

    Args:
        key: Manifest key shaped ``<prefix>/<owner>-<name>@<version>[/<subpath>]``

    Returns:
        DependencyIdentifier for the key

    Raises:
        MalformedIdentifierError: If the key does not have the expected shape

    Examples:
        >>> parse_identifier("components/foo-bar@1.2.3/index.js").component
        'foo/bar'
        >>> parse_identifier("components/acme-my-lib@2.0.0/sub").name
        'my-lib'
    """
    segments = key.split("/")
    if len(segments) < 2 or not segments[1]:
        raise MalformedIdentifierError(
            f"Malformed manifest key '{key}': expected '<prefix>/<owner>-<name>@<version>'",
            key=key,
        )

    slug = segments[1].split("@")
    if len(slug) != 2:
        raise MalformedIdentifierError(
            f"Malformed manifest key '{key}': '{segments[1]}' must contain exactly one '@'",
            key=key,
        )

    slug_part, version = slug
    if not version:
        raise MalformedIdentifierError(
            f"Malformed manifest key '{key}': missing version after '@'",
            key=key,
        )

    owner, sep, name = slug_part.partition("-")
    if not sep or not owner or not name:
        raise MalformedIdentifierError(
            f"Malformed manifest key '{key}': '{slug_part}' is not an '<owner>-<name>' pair",
            key=key,
        )

    return DependencyIdentifier(owner=owner, name=name, version=version)


__all__ = ["DependencyIdentifier", "parse_identifier"]

"""Slugs and cross-reference links between documented entities.

Entities under the project's root namespace are internal and link to the
generated page for that entity. Anything else is assumed to belong to the
framework and links to its hosted API documentation for the installed
major.minor version.
"""

import re
from typing import Iterable

from classdoc.models import NAMESPACE_SEPARATOR, EntityDescriptor, Link

DEFAULT_ROOT_NAMESPACE = "App"
DEFAULT_EXTERNAL_BASE_URL = "https://laravel.com/api/"
DEFAULT_FRAMEWORK_VERSION = "6.0"

_WORD_BOUNDARY_RE = re.compile(r"(.)(?=[A-Z])")
_WHITESPACE_RE = re.compile(r"\s+")


def kebab_case(value: str) -> str:
    """Convert a StudlyCase name segment to kebab-case.

    A dash goes before every capital letter that follows another character,
    so acronyms are split letter by letter ("HTTPClient" -> "h-t-t-p-client").

    Args:
        value: Name segment to convert

    Returns:
        Lower-case, dash-separated segment
    """
    if value.islower():
        return value
    value = _WHITESPACE_RE.sub("", value)
    return _WORD_BOUNDARY_RE.sub(r"\1-", value).lower()


def class_slug(name: str, internal: bool = True) -> str:
    """Build the path-like slug for a qualified entity name.

    Args:
        name: Qualified name such as "App\\Models\\User"
        internal: Kebab-case every segment when True, keep the name verbatim otherwise

    Returns:
        Slug with "/" separators, e.g. "app/models/user"
    """
    name = name.lstrip(NAMESPACE_SEPARATOR)
    if internal:
        return "/".join(kebab_case(part) for part in name.split(NAMESPACE_SEPARATOR))
    return name.replace(NAMESPACE_SEPARATOR, "/")


def short_version(version: str) -> str:
    """Reduce a version string to major.minor ("6.2.4" -> "6.2")."""
    version = version.strip().lstrip("vV")
    parts = version.split(".")
    return ".".join(parts[:2])


def root_segment(name: str) -> str:
    return name.lstrip(NAMESPACE_SEPARATOR).split(NAMESPACE_SEPARATOR, 1)[0]


class LinkResolver:
    """Decides how one entity's page refers to another."""

    def __init__(
        self,
        root_namespace: str = DEFAULT_ROOT_NAMESPACE,
        external_base_url: str = DEFAULT_EXTERNAL_BASE_URL,
        framework_version: str = DEFAULT_FRAMEWORK_VERSION,
    ):
        self.root_namespace = root_namespace
        self.external_base_url = external_base_url
        self.framework_version = short_version(framework_version)

    def is_internal(self, name: str) -> bool:
        return root_segment(name) == self.root_namespace

    def slug_for(self, entity: EntityDescriptor) -> str:
        return class_slug(entity.name, self.is_internal(entity.name))

    def resolve(self, entity: EntityDescriptor) -> Link:
        """Build the link to an entity's documentation page."""
        internal = self.is_internal(entity.name)
        slug = class_slug(entity.name, internal)

        if internal:
            target = f"/{slug}.html"
        else:
            target = f"{self.external_base_url}{self.framework_version}/{slug}.html"

        return Link(name=entity.name, slug=slug, target=target, internal=internal)

    def resolve_many(self, entities: Iterable[EntityDescriptor]) -> str:
        """Comma-join the Markdown links for several entities, in input order."""
        return ", ".join(self.resolve(entity).markdown() for entity in entities)

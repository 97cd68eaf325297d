"""Work out which members an entity declares itself.

An entity's full listing contains its own members plus everything reachable
through mixins, the ancestor chain and interfaces. A member counts as owned
when its name does not also appear in the ancestor's listing or in any mixin's
listing. The comparison is by name only, so an override of an inherited method
is not owned either.
"""

from classdoc.models import EntityDescriptor, MemberDescriptor, Provenance

METHODS = "methods"
PROPERTIES = "properties"


def _declared(entity: EntityDescriptor, kind: str) -> list[MemberDescriptor]:
    if kind == METHODS:
        return entity.methods
    if kind == PROPERTIES:
        return entity.properties
    raise ValueError(f"Unknown member kind: {kind}")


def all_members(
    entity: EntityDescriptor,
    kind: str,
    _seen: frozenset[int] = frozenset()
) -> dict[str, MemberDescriptor]:
    """List every member visible on an entity, in declaration order.

    Args:
        entity: Entity to list
        kind: "methods" or "properties"

    Returns:
        Mapping of member name to descriptor. The entity's own members come
        first, then mixin members, then the ancestor chain, then interfaces.
        The first descriptor seen for a name wins.
    """
    if id(entity) in _seen:
        return {}
    seen = _seen | {id(entity)}

    members: dict[str, MemberDescriptor] = {}
    for member in _declared(entity, kind):
        members.setdefault(member.name, member)

    related = list(entity.mixins)
    if entity.ancestor is not None:
        related.append(entity.ancestor)
    related.extend(entity.interfaces)

    for other in related:
        for name, member in all_members(other, kind, seen).items():
            members.setdefault(name, member)

    return members


def member_provenance(entity: EntityDescriptor, kind: str) -> dict[str, Provenance]:
    """Tag every listed member as declared, inherited or composed.

    Names found in the ancestor's listing are inherited; otherwise names found
    in a mixin's listing are composed; everything else is declared.
    """
    listing = all_members(entity, kind)

    inherited: set[str] = set()
    if entity.ancestor is not None:
        inherited = set(all_members(entity.ancestor, kind))

    composed: set[str] = set()
    for mixin in entity.mixins:
        composed.update(all_members(mixin, kind))

    provenance = {}
    for name in listing:
        if name in inherited:
            provenance[name] = Provenance.INHERITED
        elif name in composed:
            provenance[name] = Provenance.COMPOSED
        else:
            provenance[name] = Provenance.DECLARED
    return provenance


def owned_members(entity: EntityDescriptor, kind: str) -> list[MemberDescriptor]:
    """Return the members an entity declares directly, in listing order."""
    listing = all_members(entity, kind)
    provenance = member_provenance(entity, kind)
    return [
        member for name, member in listing.items()
        if provenance[name] == Provenance.DECLARED
    ]


def owned_methods(entity: EntityDescriptor) -> list[MemberDescriptor]:
    return owned_members(entity, METHODS)


def owned_properties(entity: EntityDescriptor) -> list[MemberDescriptor]:
    return owned_members(entity, PROPERTIES)

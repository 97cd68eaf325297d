from classdoc.models import EntityDescriptor, MemberDescriptor, Modifier, ParameterDescriptor


def make_method(name, modifiers=Modifier.PUBLIC, params=(), doc=None, return_type=None):
    """Build a method descriptor; params are names or ParameterDescriptor objects."""
    parameters = []
    for position, param in enumerate(params):
        if isinstance(param, ParameterDescriptor):
            parameters.append(param)
        else:
            parameters.append(ParameterDescriptor(name=param, position=position))
    return MemberDescriptor(
        name=name,
        modifiers=modifiers,
        doc_comment=doc,
        parameters=parameters,
        type=return_type,
    )


def make_property(name, modifiers=Modifier.PUBLIC, doc=None, type=None):
    return MemberDescriptor(name=name, modifiers=modifiers, doc_comment=doc, type=type)


def make_entity(name, methods=(), properties=(), ancestor=None, interfaces=(), mixins=(), kind="class", doc=None):
    return EntityDescriptor(
        name=name,
        kind=kind,
        methods=[make_method(m) if isinstance(m, str) else m for m in methods],
        properties=[make_property(p) if isinstance(p, str) else p for p in properties],
        ancestor=ancestor,
        interfaces=list(interfaces),
        mixins=list(mixins),
        doc_comment=doc,
        path=f"{name}.php",
    )

"""Build EntitySummary records from linked entity descriptors."""

import re

from classdoc.classifier import COMPAT, classify
from classdoc.docblock import parse_doc_comment
from classdoc.links import LinkResolver
from classdoc.models import (
    DocKind,
    EntityDescriptor,
    EntitySummary,
    MemberDescriptor,
    MemberSummary,
    ParameterDescriptor,
    ParameterSummary,
)
from classdoc.ownership import owned_methods, owned_properties

NOTHING = "Nothing"
DEFAULT_TYPE = "mixed"
DEFAULT_RETURN_TYPE = "void"

_ARRAY_LITERAL_RE = re.compile(r"^(\[.*\]|array\s*\(.*\))$", re.IGNORECASE | re.DOTALL)


def render_default(literal: str) -> str:
    """Render a default value literal for a signature.

    Array literals of any content render as "[]"; every other literal is kept
    verbatim, including falsy ones such as 0, false or ''.
    """
    literal = literal.strip()
    if _ARRAY_LITERAL_RE.match(literal):
        return "[]"
    return literal


class EntitySummarizer:
    """Assembles the documentation view of an entity.

    Args:
        link_resolver: Resolver used for the ancestor, interface and mixin links
        classification: Member classification mode, "compat" or "strict"
        lenient_docblocks: Accept `@var <type>` without a variable name and
            fall back to the first docblock line for property descriptions
    """

    def __init__(
        self,
        link_resolver: LinkResolver | None = None,
        classification: str = COMPAT,
        lenient_docblocks: bool = False,
    ):
        self.link_resolver = link_resolver or LinkResolver()
        self.classification = classification
        self.lenient_docblocks = lenient_docblocks

    def summarize(self, entity: EntityDescriptor) -> EntitySummary:
        ancestor = None
        extends = NOTHING
        if entity.ancestor is not None:
            ancestor = self.link_resolver.resolve(entity.ancestor)
            extends = ancestor.markdown()

        interfaces = tuple(self.link_resolver.resolve(i) for i in entity.interfaces)
        mixins = tuple(self.link_resolver.resolve(m) for m in entity.mixins)

        return EntitySummary(
            name=entity.name,
            short_name=entity.short_name,
            namespace=entity.namespace,
            kind=entity.kind,
            extends=extends,
            implements=self.link_resolver.resolve_many(entity.interfaces) or NOTHING,
            uses=self.link_resolver.resolve_many(entity.mixins) or NOTHING,
            ancestor=ancestor,
            interfaces=interfaces,
            mixins=mixins,
            methods=tuple(self.summarize_method(m) for m in owned_methods(entity)),
            properties=tuple(self.summarize_property(p) for p in owned_properties(entity)),
            description=parse_doc_comment(entity.doc_comment, DocKind.METHOD).description,
        )

    def summarize_method(self, method: MemberDescriptor) -> MemberSummary:
        classification = classify(method, self.classification)
        doc = parse_doc_comment(method.doc_comment, DocKind.METHOD)

        params = tuple(
            self._summarize_parameter(parameter, doc.params)
            for parameter in method.parameters
        )
        return_type = doc.return_type or method.type or DEFAULT_RETURN_TYPE

        arguments = ", ".join(_parameter_string(param) for param in params)
        signature = (
            f"{classification.label} function {method.name}( {arguments} ) : {return_type}"
        )

        return MemberSummary(
            name=method.name,
            label=classification.label,
            severity=classification.severity,
            is_static=classification.is_static,
            type=return_type,
            signature=signature,
            description=doc.description,
            params=params,
        )

    def summarize_property(self, prop: MemberDescriptor) -> MemberSummary:
        classification = classify(prop, self.classification)
        doc = parse_doc_comment(prop.doc_comment, DocKind.FIELD, self.lenient_docblocks)
        description = doc.var_description
        if description is None and self.lenient_docblocks:
            description = doc.description

        return MemberSummary(
            name=prop.name,
            label=classification.label,
            severity=classification.severity,
            is_static=classification.is_static,
            type=doc.var_type or prop.type or DEFAULT_TYPE,
            signature=f"{classification.label} ${prop.name};",
            description=description,
        )

    def _summarize_parameter(
        self,
        parameter: ParameterDescriptor,
        doc_params: tuple[tuple[str, str | None], ...]
    ) -> ParameterSummary:
        # Docblock tags are matched by position, not by the name in the tag
        doc_type = None
        doc_description = None
        if parameter.position < len(doc_params):
            doc_type, doc_description = doc_params[parameter.position]

        default = None
        if parameter.is_optional and parameter.has_default:
            default = render_default(parameter.default)

        return ParameterSummary(
            name=parameter.name,
            type=doc_type or parameter.type or DEFAULT_TYPE,
            description=doc_description,
            default=default,
        )


def _parameter_string(param: ParameterSummary) -> str:
    text = f"{param.type} ${param.name}"
    if param.default is not None:
        text += f" = {param.default}"
    return text

import re

import tree_sitter_php
from tree_sitter import Language, Node, Parser

from classdoc.models import (
    NAMESPACE_SEPARATOR,
    Declaration,
    MemberDescriptor,
    Modifier,
    ParameterDescriptor,
)
from classdoc.parsers.base import BaseParser

DECLARATION_KINDS = {
    "class_declaration": "class",
    "interface_declaration": "interface",
    "trait_declaration": "trait",
}

NAME_NODE_TYPES = ("name", "qualified_name")

PARAMETER_NODE_TYPES = (
    "simple_parameter",
    "variadic_parameter",
    "property_promotion_parameter",
)

VISIBILITY = {
    "public": Modifier.PUBLIC,
    "protected": Modifier.PROTECTED,
    "private": Modifier.PRIVATE,
}

FLAG_MODIFIERS = {
    "static_modifier": Modifier.STATIC,
    "abstract_modifier": Modifier.ABSTRACT,
    "final_modifier": Modifier.FINAL,
}

_USE_PREFIX_RE = re.compile(r"^use\s+", re.IGNORECASE)
_USE_KIND_RE = re.compile(r"^(function|const)\s", re.IGNORECASE)
_USE_GROUP_RE = re.compile(r"^(.*?)\\?\s*\{(.*)\}$", re.DOTALL)
_USE_CLAUSE_RE = re.compile(r"^\\?([\w\\]+?)(?:\s+as\s+(\w+))?$", re.IGNORECASE)


def _text(node: Node | None) -> str:
    if node is None:
        return ""
    return node.text.decode("utf8")


def parse_use_imports(statement: str) -> dict[str, str]:
    """Parse a namespace ``use`` statement into an alias map.

    Handles plain, aliased, comma-separated and grouped imports. Function and
    constant imports are ignored.

    Args:
        statement: Source text of the statement, e.g. "use Foo\\Bar as Baz;"

    Returns:
        Mapping of lower-cased alias to fully qualified name
    """
    text = statement.strip().rstrip(";").strip()
    text = _USE_PREFIX_RE.sub("", text)
    if _USE_KIND_RE.match(text):
        return {}

    group = _USE_GROUP_RE.match(text)
    if group:
        prefix = group.group(1).strip().strip(NAMESPACE_SEPARATOR)
        clauses = [
            f"{prefix}{NAMESPACE_SEPARATOR}{clause.strip()}"
            for clause in group.group(2).split(",")
            if clause.strip()
        ]
    else:
        clauses = [clause.strip() for clause in text.split(",") if clause.strip()]

    imports = {}
    for clause in clauses:
        match = _USE_CLAUSE_RE.match(clause)
        if not match:
            continue
        full_name = match.group(1).strip(NAMESPACE_SEPARATOR)
        alias = match.group(2) or full_name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]
        imports[alias.lower()] = full_name
    return imports


class NameScope:
    """Namespace and imports in effect at a point in a PHP file."""

    def __init__(self, namespace: str = ""):
        self.namespace = namespace.strip(NAMESPACE_SEPARATOR)
        self.imports: dict[str, str] = {}

    def declare(self, short_name: str) -> str:
        if self.namespace:
            return f"{self.namespace}{NAMESPACE_SEPARATOR}{short_name}"
        return short_name

    def resolve(self, name: str) -> str:
        """Resolve a class reference to its fully qualified name."""
        if name.startswith(NAMESPACE_SEPARATOR):
            return name[1:]

        first, _, rest = name.partition(NAMESPACE_SEPARATOR)
        imported = self.imports.get(first.lower())
        if imported is not None:
            return f"{imported}{NAMESPACE_SEPARATOR}{rest}" if rest else imported

        return self.declare(name)


class PhpParser(BaseParser):
    """Parser for extracting class-like declarations from PHP source using tree-sitter."""

    def __init__(self):
        self.language = Language(tree_sitter_php.language_php())
        self.parser = Parser(self.language)

    def extract_declarations(self, source_code: str, file_path: str) -> list[Declaration]:
        """Extract classes, interfaces and traits from PHP source code.

        Args:
            source_code: PHP source code to parse
            file_path: Relative path to the file

        Returns:
            List of Declaration objects, in source order
        """
        tree = self.parser.parse(bytes(source_code, "utf8"))
        declarations: list[Declaration] = []
        self._walk(tree.root_node.children, NameScope(), file_path, declarations)
        return declarations

    def _walk(self, nodes, scope: NameScope, file_path: str, declarations: list[Declaration]) -> None:
        for node in nodes:
            if node.type == "namespace_definition":
                name_node = _field_or_type(node, "name", "namespace_name")
                body = _field_or_type(node, "body", "compound_statement")
                if body is not None:
                    # Bracketed namespace: its own scope
                    self._walk(body.children, NameScope(_text(name_node)), file_path, declarations)
                else:
                    # Semicolon namespace: applies to the rest of the file
                    scope.namespace = _text(name_node).strip(NAMESPACE_SEPARATOR)
                    scope.imports = {}

            elif node.type == "namespace_use_declaration":
                scope.imports.update(parse_use_imports(_text(node)))

            elif node.type in DECLARATION_KINDS:
                declarations.append(self._build_declaration(node, scope, file_path))

    def _build_declaration(self, node: Node, scope: NameScope, file_path: str) -> Declaration:
        kind = DECLARATION_KINDS[node.type]
        declaration = Declaration(
            name=scope.declare(_text(node.child_by_field_name("name"))),
            kind=kind,
            path=file_path,
            doc_comment=_doc_comment(node),
        )

        for child in node.named_children:
            if child.type == "base_clause":
                names = [scope.resolve(n) for n in _referenced_names(child)]
                if kind == "interface":
                    # Interfaces extend other interfaces
                    declaration.implements.extend(names)
                elif names:
                    declaration.extends = names[0]
            elif child.type == "class_interface_clause":
                declaration.implements.extend(scope.resolve(n) for n in _referenced_names(child))

        body = node.child_by_field_name("body")
        if body is None:
            return declaration

        for item in body.named_children:
            if item.type == "method_declaration":
                method, promoted = self._build_method(item, kind)
                declaration.methods.append(method)
                declaration.properties.extend(promoted)
            elif item.type == "property_declaration":
                declaration.properties.extend(self._build_properties(item))
            elif item.type == "use_declaration":
                declaration.uses.extend(scope.resolve(n) for n in _referenced_names(item))

        return declaration

    def _build_method(self, node: Node, kind: str) -> tuple[MemberDescriptor, list[MemberDescriptor]]:
        """Build a method descriptor plus any constructor-promoted properties."""
        modifiers = _modifiers(node)
        if kind == "interface":
            modifiers |= Modifier.ABSTRACT

        parameters, promoted = self._extract_parameters(node.child_by_field_name("parameters"))
        return_type = node.child_by_field_name("return_type")

        method = MemberDescriptor(
            name=_text(node.child_by_field_name("name")),
            modifiers=modifiers,
            doc_comment=_doc_comment(node),
            parameters=parameters,
            type=_text(return_type) if return_type is not None else None,
        )
        return method, promoted

    def _extract_parameters(
        self,
        params_node: Node | None
    ) -> tuple[list[ParameterDescriptor], list[MemberDescriptor]]:
        """Extract parameters from a formal_parameters node.

        Returns:
            Tuple of (parameters in declaration order, promoted properties)
        """
        parameters: list[ParameterDescriptor] = []
        promoted: list[MemberDescriptor] = []
        if params_node is None:
            return parameters, promoted

        for child in params_node.named_children:
            if child.type not in PARAMETER_NODE_TYPES:
                continue

            name = _text(child.child_by_field_name("name")).lstrip("&").lstrip("$")
            type_node = child.child_by_field_name("type")
            default_node = child.child_by_field_name("default_value")
            param_type = _text(type_node) or None

            parameters.append(ParameterDescriptor(
                name=name,
                position=len(parameters),
                type=param_type,
                default=_text(default_node) if default_node is not None else None,
                is_variadic=child.type == "variadic_parameter",
            ))

            if child.type == "property_promotion_parameter":
                promoted.append(MemberDescriptor(
                    name=name,
                    modifiers=_modifiers(child),
                    type=param_type,
                ))

        # A default only makes a parameter optional if no required one follows
        required_seen = False
        for parameter in reversed(parameters):
            if parameter.is_variadic or (parameter.has_default and not required_seen):
                parameter.is_optional = True
            else:
                required_seen = True

        return parameters, promoted

    def _build_properties(self, node: Node) -> list[MemberDescriptor]:
        modifiers = _modifiers(node)
        type_node = node.child_by_field_name("type")
        doc_comment = _doc_comment(node)

        properties = []
        for element in node.named_children:
            if element.type != "property_element":
                continue
            for child in element.named_children:
                if child.type == "variable_name":
                    properties.append(MemberDescriptor(
                        name=_text(child).lstrip("$"),
                        modifiers=modifiers,
                        doc_comment=doc_comment,
                        type=_text(type_node) if type_node is not None else None,
                    ))
                    break
        return properties


def _modifiers(node: Node) -> Modifier:
    """Read modifier keywords off a member node; visibility defaults to public."""
    modifiers = Modifier(0)
    visibility = Modifier.PUBLIC
    for child in node.children:
        if child.type == "visibility_modifier":
            # Strip asymmetric visibility suffixes such as "private(set)"
            keyword = _text(child).lower().split("(")[0].strip()
            visibility = VISIBILITY.get(keyword, Modifier.PUBLIC)
        elif child.type in FLAG_MODIFIERS:
            modifiers |= FLAG_MODIFIERS[child.type]
    return modifiers | visibility


def _field_or_type(node: Node, field_name: str, node_type: str) -> Node | None:
    """Look a child up by field name, falling back to the first child of a type."""
    child = node.child_by_field_name(field_name)
    if child is not None:
        return child
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None


def _referenced_names(node: Node) -> list[str]:
    return [_text(child) for child in node.named_children if child.type in NAME_NODE_TYPES]


def _doc_comment(node: Node) -> str | None:
    """Return the /** */ comment directly preceding a declaration, if any."""
    previous = node.prev_named_sibling
    if previous is None or previous.type != "comment":
        return None
    text = _text(previous)
    if not text.startswith("/**"):
        return None
    return text

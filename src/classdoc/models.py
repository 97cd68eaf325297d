from dataclasses import dataclass, field
from enum import Enum, IntFlag


NAMESPACE_SEPARATOR = "\\"


class Modifier(IntFlag):
    """Member modifier bits, using the same values as PHP reflection."""
    PUBLIC = 1
    PROTECTED = 2
    PRIVATE = 4
    STATIC = 16
    FINAL = 32
    ABSTRACT = 64


class DocKind(str, Enum):
    """Which tag grammar a doc comment is parsed with."""
    METHOD = "method"
    FIELD = "field"


class Provenance(str, Enum):
    """Where a listed member comes from, relative to the entity being documented."""
    DECLARED = "declared"
    INHERITED = "inherited"
    COMPOSED = "composed"


@dataclass
class ParameterDescriptor:
    """Represents a method parameter as declared in source."""
    name: str
    position: int
    type: str | None = None  # None if no type hint
    default: str | None = None  # Default value literal, None if absent
    is_optional: bool = False
    is_variadic: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass
class MemberDescriptor:
    """Represents a method or property declared by an entity."""
    name: str
    modifiers: Modifier = Modifier.PUBLIC
    doc_comment: str | None = None
    parameters: list[ParameterDescriptor] = field(default_factory=list)
    type: str | None = None  # Declared property type or method return type

    @property
    def is_static(self) -> bool:
        return bool(self.modifiers & Modifier.STATIC)


@dataclass
class Declaration:
    """A class-like declaration as read from one source file.

    Referenced names (extends, implements, uses) are fully qualified but not
    yet linked to other declarations.
    """
    name: str
    kind: str  # "class", "interface" or "trait"
    path: str = ""
    extends: str | None = None
    implements: list[str] = field(default_factory=list)
    uses: list[str] = field(default_factory=list)
    methods: list[MemberDescriptor] = field(default_factory=list)
    properties: list[MemberDescriptor] = field(default_factory=list)
    doc_comment: str | None = None


@dataclass(eq=False)
class EntityDescriptor:
    """A class-like entity with its ancestor, interfaces and mixins linked."""
    name: str
    kind: str = "class"
    methods: list[MemberDescriptor] = field(default_factory=list)
    properties: list[MemberDescriptor] = field(default_factory=list)
    ancestor: "EntityDescriptor | None" = None
    interfaces: list["EntityDescriptor"] = field(default_factory=list)
    mixins: list["EntityDescriptor"] = field(default_factory=list)
    doc_comment: str | None = None
    path: str | None = None  # None for entities that were not indexed

    @property
    def short_name(self) -> str:
        return self.name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]

    @property
    def namespace(self) -> str:
        if NAMESPACE_SEPARATOR not in self.name:
            return ""
        return self.name.rsplit(NAMESPACE_SEPARATOR, 1)[0]

    @property
    def is_external(self) -> bool:
        return self.kind == "external"


@dataclass(frozen=True)
class ParsedDoc:
    """Structured fields pulled out of a doc comment."""
    description: str | None = None
    params: tuple[tuple[str, str | None], ...] = ()  # (type, description) in tag order
    return_type: str | None = None
    return_description: str | None = None
    var_type: str | None = None
    var_description: str | None = None


@dataclass(frozen=True)
class Classification:
    label: str
    severity: str  # "tip" or "warning"
    is_static: bool


@dataclass(frozen=True)
class Link:
    """Reference to another entity's documentation page."""
    name: str
    slug: str
    target: str
    internal: bool

    def markdown(self) -> str:
        return f"[{self.name}]({self.target})"


@dataclass(frozen=True)
class ParameterSummary:
    name: str
    type: str
    description: str | None = None
    default: str | None = None  # Rendered default, None if the parameter is required

    @property
    def optional(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class MemberSummary:
    """Documentation-ready view of one owned method or property."""
    name: str
    label: str
    severity: str
    is_static: bool
    type: str  # Return type for methods, value type for properties
    signature: str
    description: str | None = None
    params: tuple[ParameterSummary, ...] = ()


@dataclass(frozen=True)
class EntitySummary:
    """Everything the renderer needs to write one entity's page."""
    name: str
    short_name: str
    namespace: str
    kind: str
    extends: str  # Rendered ancestor link, or the "Nothing" sentinel
    implements: str
    uses: str
    ancestor: Link | None = None
    interfaces: tuple[Link, ...] = ()
    mixins: tuple[Link, ...] = ()
    methods: tuple[MemberSummary, ...] = ()
    properties: tuple[MemberSummary, ...] = ()
    description: str | None = None

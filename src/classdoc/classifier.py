"""Visibility and modifier classification for methods and properties."""

from classdoc.models import Classification, MemberDescriptor, Modifier

COMPAT = "compat"
STRICT = "strict"
MODES = (COMPAT, STRICT)

# First matching bit wins in compat mode
PRIORITY = (
    (Modifier.PROTECTED, "protected"),
    (Modifier.PRIVATE, "private"),
    (Modifier.ABSTRACT, "abstract"),
    (Modifier.FINAL, "final"),
)


def visibility_of(modifiers: Modifier) -> str:
    if modifiers & Modifier.PROTECTED:
        return "protected"
    if modifiers & Modifier.PRIVATE:
        return "private"
    return "public"


def _compat_label(modifiers: Modifier) -> str:
    for flag, label in PRIORITY:
        if modifiers & flag:
            return label
    return "public"


def _strict_label(modifiers: Modifier) -> str:
    words = []
    if modifiers & Modifier.ABSTRACT:
        words.append("abstract")
    if modifiers & Modifier.FINAL:
        words.append("final")
    words.append(visibility_of(modifiers))
    return " ".join(words)


def classify(member: MemberDescriptor, mode: str = COMPAT) -> Classification:
    """Classify a member for display.

    In compat mode a single label is chosen by checking protected, private,
    abstract and final in that order, so an abstract protected method is
    labelled "protected". Strict mode keeps every modifier in the label.

    Args:
        member: Method or property descriptor
        mode: "compat" or "strict"

    Returns:
        Classification with the display label, the callout severity
        ("tip" for plain public members, "warning" otherwise) and static-ness

    Raises:
        ValueError: If mode is not a known classification mode
    """
    if mode == COMPAT:
        label = _compat_label(member.modifiers)
    elif mode == STRICT:
        label = _strict_label(member.modifiers)
    else:
        raise ValueError(f"Unknown classification mode: {mode}")

    severity = "tip" if label == "public" else "warning"

    if member.is_static:
        label += " static"

    return Classification(label=label, severity=severity, is_static=member.is_static)

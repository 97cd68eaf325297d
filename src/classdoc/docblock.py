"""Line-oriented parser for PHP docblock comments.

Only the handful of tags the documentation pages use are understood:
``@param``, ``@return`` and ``@var``. Anything that does not match is ignored,
so a malformed comment simply yields fewer fields.
"""

import re

from classdoc.models import DocKind, ParsedDoc

DESCRIPTION_RE = re.compile(r"^(\w[^*].+)$")
PARAM_RE = re.compile(r"^@param\s+(\S+?)\s*\$(\w+)\s*(.*)$")
RETURN_RE = re.compile(r"^@return\s+(.+)$")
VAR_RE = re.compile(r"^@var\s+(.+)\s\$(\w+)\s*(.*)$")
LENIENT_VAR_RE = re.compile(r"^@var\s+(.+)$")
VARIABLE_RE = re.compile(r"^\$\w+\s*")

_OPENERS = "<([{"
_CLOSERS = ">)]}"
_TYPE_JOINERS = ("|", "&")


def split_type(text: str) -> tuple[str, str]:
    """Split a tag body into its type expression and the text after it.

    The type ends at the first whitespace outside brackets, so generic and
    shaped types such as ``array<string, int>`` stay whole. Whitespace next to
    a union ``|`` or intersection ``&`` belongs to the type.

    Returns:
        (type, rest) where rest is an empty string when nothing follows
    """
    text = text.strip()
    depth = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS and depth:
            depth -= 1
        elif char.isspace() and depth == 0:
            rest = text[i:].lstrip()
            previous = text[:i].rstrip()[-1:]
            if rest[:1] in _TYPE_JOINERS or previous in _TYPE_JOINERS:
                i = len(text) - len(rest)
                continue
            return text[:i], rest
        i += 1
    return text, ""


def clean_lines(comment: str) -> list[str]:
    """Strip comment delimiters and leading asterisks from each line.

    Args:
        comment: Raw comment text, including the ``/**`` and ``*/`` markers

    Returns:
        The content of every line, whitespace-trimmed (empty lines included)
    """
    lines = []
    for raw in comment.splitlines():
        line = raw.strip()
        if line.startswith("/**"):
            line = line[3:]
        elif line.startswith("/*"):
            line = line[2:]
        if line.endswith("*/"):
            line = line[:-2]
        line = line.strip()
        if line.startswith("*"):
            line = line.lstrip("*")
        lines.append(line.strip())
    return lines


def _or_none(text: str | None) -> str | None:
    if text is None:
        return None
    text = text.strip()
    return text or None


def parse_description(lines: list[str]) -> str | None:
    """Return the first prose line, skipping tag lines."""
    for line in lines:
        match = DESCRIPTION_RE.match(line)
        if match:
            return match.group(1).strip()
    return None


def _parse_var(lines: list[str], lenient: bool) -> tuple[str | None, str | None]:
    for line in lines:
        if not lenient:
            match = VAR_RE.match(line)
            if match:
                return match.group(1).strip(), _or_none(match.group(3))
            continue

        match = LENIENT_VAR_RE.match(line)
        if match:
            var_type, rest = split_type(match.group(1))
            return var_type, _or_none(VARIABLE_RE.sub("", rest, count=1))
    return None, None


def parse_doc_comment(
    comment: str | None,
    kind: DocKind = DocKind.METHOD,
    lenient: bool = False,
) -> ParsedDoc:
    """Parse a doc comment into a ParsedDoc.

    ``@param`` tags are collected in the order they appear. Callers pair the
    Nth tag with the Nth declared parameter; the ``$name`` written in the tag
    plays no part in that pairing.

    A ``@var`` tag only counts when it names the variable
    (``@var <type> $<name> [description]``). With ``lenient`` set, the name is
    optional, which also accepts the short ``@var <type>`` form.

    Args:
        comment: Raw doc comment text, or None when the member has none
        kind: Whether to read method tags (@param/@return) or field tags (@var)
        lenient: Accept ``@var`` tags without a variable name

    Returns:
        ParsedDoc with every field the comment provides, None/empty otherwise
    """
    if not comment:
        return ParsedDoc()

    lines = clean_lines(comment)
    description = parse_description(lines)

    if kind == DocKind.FIELD:
        var_type, var_description = _parse_var(lines, lenient)
        return ParsedDoc(
            description=description,
            var_type=var_type,
            var_description=var_description,
        )

    params = []
    return_type = None
    return_description = None
    for line in lines:
        match = PARAM_RE.match(line)
        if match:
            params.append((match.group(1), _or_none(match.group(3))))
            continue

        if return_type is None:
            match = RETURN_RE.match(line)
            if match:
                return_type, rest = split_type(match.group(1))
                return_description = _or_none(rest)

    return ParsedDoc(
        description=description,
        params=tuple(params),
        return_type=return_type,
        return_description=return_description,
    )

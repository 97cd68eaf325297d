"""Markdown rendering for entity summaries.

Pages use VuePress custom containers (``::: tip``/``::: warning``) for each
member and the ``<Badge/>`` component to flag optional parameters.
"""

import re

from classdoc.models import EntitySummary, MemberSummary

NO_METHODS = "> There are no methods for this class."
NO_PROPERTIES = "> There are no properties for this class."
OPTIONAL_BADGE = '<Badge text="optional" type="warn"/>'

_LEADING_SPACES_RE = re.compile(r"^( )+", re.MULTILINE)


def _method_block(method: MemberSummary) -> str:
    md = f"""
    ::: {method.severity} {method.name}
    -----"""

    if method.description:
        md += f"""
        {method.description}
        """

    md += f"""
    ```php{{4}}
    {method.signature}
    ```
    """

    if method.params:
        md += """
        | Parameter | Type(s)   | Description |
        | --------- | :-------: | :----------- |
        """
        for param in method.params:
            badge = OPTIONAL_BADGE if param.optional else ""
            description = param.description or ""
            md += f"| `${param.name}`{badge} | `{param.type}` | {description} |\n"

    md += ":::\n"
    return md


def _property_block(prop: MemberSummary) -> str:
    md = f"""
    ::: {prop.severity} ${prop.name}
    -----"""

    if prop.description:
        md += f"""
        {prop.description}
        """

    md += f"""
    ```php{{4}}
    {prop.signature}
    ```
    ***Type***
    * `{prop.type}`
    :::
    """
    return md


def render_markdown(summary: EntitySummary) -> str:
    """Render one entity's documentation page.

    Args:
        summary: Entity summary to render

    Returns:
        Markdown text with the title, metadata table, methods section and
        properties section, each line stripped of leading spaces
    """
    md = f"# {summary.short_name}\n"

    md += f"""
    ## `{summary.name}`
    """

    if summary.description:
        md += f"""
        {summary.description}
        """

    md += f"""
    |                |         |
    | -------------: | :------ |
    | **Extends**    | {summary.extends}    |
    | **Implements** | {summary.implements} |
    | **Uses**       | {summary.uses}       |

    ### Methods
    """

    if summary.methods:
        for method in summary.methods:
            md += _method_block(method)
    else:
        md += f"""
        {NO_METHODS}
        """

    md += """
    ### Properties
    """

    if summary.properties:
        for prop in summary.properties:
            md += _property_block(prop)
    else:
        md += f"""
        {NO_PROPERTIES}
        """

    return _LEADING_SPACES_RE.sub("", md)

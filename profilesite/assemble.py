"""
Page assembler: data document -> page body.

The output depends only on which fields are present in the document, never
on their order in the file, and contains no counters or random ids, so
assembling the same document twice gives byte-identical markup.
"""

from markupsafe import Markup

from profilesite.errors import UnknownSectionType
from profilesite.sections import SECTION_TABLE, build_section, dispatch
from profilesite.fragments import has_text, render_personal


def page_title(document):
    """personal.name when present, else None."""
    personal = document.get("personal") if isinstance(document, dict) else None
    if isinstance(personal, dict) and has_text(personal.get("name")):
        return str(personal["name"]).strip()
    return None


def collect_sections(document, table=None) -> list:
    """Section view models for every table entry the document fills, in table order."""
    if not isinstance(document, dict):
        return []
    sections = []
    for row in SECTION_TABLE if table is None else table:
        section = build_section(document, row)
        if section is not None:
            sections.append(section)
    return sections


def render_sections(sections):
    """Dispatch each section, skipping (and reporting) the ones with no template."""
    fragments = []
    for section in sections:
        try:
            fragments.append(dispatch(section))
        except UnknownSectionType as e:
            print(f"  ⚠ Warning: {e}; skipping")
    return Markup("").join(fragments)


def assemble(document, context=None, table=None, sections=None) -> Markup:
    """
    Render the page body for a data document.

    Sections already collected from the document can be passed in to avoid
    walking the table again.

    When the document has personal.name and a context dict is given, the
    name is stored as context["title"]; nothing else is written outside the
    returned markup.
    """
    body = []

    title = page_title(document)
    if title is not None:
        if context is not None:
            context["title"] = title
        body.append(render_personal(document["personal"]))

    if sections is None:
        sections = collect_sections(document, table)
    body.append(render_sections(sections))
    return Markup("").join(body)

"""
Section model and dispatcher.

A section is a plain dict: {"id", "title", "type", "items"} plus an optional
"link" for the heading. The assembler builds one per entry of SECTION_TABLE
whose document field is present, hands it to dispatch(), and throws it away.

Data documents come in several shapes (interests and contact either at the
top level or under "personal", timeline entries using company/university
instead of subtitle, and so on). Rather than one renderer per shape, the
table lists every path a section may live under and FIELD_ALIASES maps the
alternative entry keys onto the canonical ones.
"""

from profilesite.errors import UnknownSectionType
from profilesite.fragments import (
    has_text,
    render_contact_section,
    render_tags_section,
    render_timeline_section,
)


# ============================================================================
# SECTION TABLE
# ============================================================================

TIMELINE = "timeline"
TAGS = "tags"
LINKS = "links"

# Rendered in this order, whatever order the keys have in the document
SECTION_TABLE = [
    {"id": "experience", "title": "Experience", "type": TIMELINE, "paths": ["experience"]},
    {"id": "education", "title": "Education", "type": TIMELINE, "paths": ["education"]},
    {"id": "thoughts", "title": "Thoughts", "type": TIMELINE, "paths": ["thoughts"]},
    {"id": "projects", "title": "Projects", "type": TIMELINE, "paths": ["projects"]},
    {"id": "interests", "title": "Interests", "type": TAGS,
     "paths": ["interests", "personal.interests"]},
    {"id": "contact", "title": "Contact", "type": LINKS,
     "paths": ["contact", "personal.contact"]},
]

# canonical entry field -> alternative keys, first present wins
FIELD_ALIASES = {
    "title": ["degree"],
    "subtitle": ["company", "university"],
    "duration": ["year"],
    "details": ["achievements"],
    "tags": ["skills"],
}

ENTRY_TEXT_FIELDS = ["title", "subtitle", "location", "duration", "description", "url"]
ENTRY_LIST_FIELDS = ["details", "tags"]


# ============================================================================
# DOCUMENT ACCESS
# ============================================================================

def resolve_path(document, path: str):
    """Follow a dotted path ("personal.contact") through nested dicts."""
    value = document
    for key in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def text_list(values) -> list:
    """Keep the printable members of a list; anything else becomes []."""
    if not isinstance(values, (list, tuple)):
        return []
    return [str(v).strip() for v in values if has_text(v)]


def normalize_entry(raw: dict) -> dict:
    """Read a timeline entry through FIELD_ALIASES into canonical keys."""
    entry = {}
    for field in ENTRY_TEXT_FIELDS + ENTRY_LIST_FIELDS:
        value = raw.get(field)
        if value is None:
            for alias in FIELD_ALIASES.get(field, []):
                if raw.get(alias) is not None:
                    value = raw[alias]
                    break
        if field in ENTRY_LIST_FIELDS:
            entry[field] = text_list(value)
        elif has_text(value):
            entry[field] = str(value).strip()
    return entry


def normalize_link(raw: dict):
    if not has_text(raw.get("url")):
        return None
    return {
        "url": str(raw["url"]).strip(),
        "icon": str(raw["icon"]).strip() if has_text(raw.get("icon")) else "",
        "label": str(raw["label"]).strip() if has_text(raw.get("label")) else "",
    }


def normalize_items(section_type, values) -> list:
    """Coerce raw document values into the item shape a section type expects.

    Values of the wrong type are dropped rather than rendered, so a section
    whose items are all malformed ends up empty and is omitted.
    """
    if not isinstance(values, (list, tuple)):
        return []
    if section_type == TIMELINE:
        return [normalize_entry(v) for v in values if isinstance(v, dict)]
    if section_type == TAGS:
        return text_list(values)
    if section_type == LINKS:
        links = [normalize_link(v) for v in values if isinstance(v, dict)]
        return [link for link in links if link]
    return list(values)


def build_section(document, row: dict):
    """Section view model for one table entry, or None when it has no items."""
    for path in row.get("paths", [row["id"]]):
        items = normalize_items(row.get("type"), resolve_path(document, path))
        if items:
            section = {
                "id": row["id"],
                "title": row.get("title", row["id"].title()),
                "type": row.get("type"),
                "items": items,
            }
            if row.get("link"):
                section["link"] = row["link"]
            return section
    return None


# ============================================================================
# DISPATCH
# ============================================================================

RENDERERS = {
    TIMELINE: render_timeline_section,
    TAGS: render_tags_section,
    LINKS: render_contact_section,
}


def dispatch(section: dict):
    """Render a section with the template function registered for its type."""
    section_type = section.get("type")
    renderer = RENDERERS.get(section_type) if isinstance(section_type, str) else None
    if renderer is None:
        raise UnknownSectionType(section.get("id"), section_type)
    return renderer(section)


def is_renderable(section: dict) -> bool:
    return isinstance(section.get("type"), str) and section["type"] in RENDERERS

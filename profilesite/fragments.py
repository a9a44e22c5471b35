"""
Template functions: one per section kind.

Each function takes a single value and returns a Markup fragment. Every
field value is escaped on the way in, so fragments can be concatenated
with each other and passed to Jinja2 without being escaped twice.
"""

from markupsafe import Markup, escape

from profilesite.config import IMAGE_SUFFIXES, NEW_CONTEXT_SUFFIXES

NEW_CONTEXT_ATTRS = ' target="_blank" rel="noopener noreferrer"'


# ============================================================================
# UTILITIES
# ============================================================================

def has_text(value) -> bool:
    """True for anything that would render as visible text."""
    if value is None or isinstance(value, (dict, list, tuple, bool)):
        return False
    return str(value).strip() != ""


def opens_new_context(url) -> bool:
    """External (http...) and document (.pdf) links open in a new tab."""
    if not has_text(url):
        return False
    url = str(url).strip()
    return url.startswith("http") or url.endswith(NEW_CONTEXT_SUFFIXES)


def link_attrs(url) -> str:
    return NEW_CONTEXT_ATTRS if opens_new_context(url) else ""


def is_image(icon) -> bool:
    return has_text(icon) and str(icon).strip().lower().endswith(IMAGE_SUFFIXES)


def render_heading(section) -> str:
    """Section heading, linked to an in-page anchor when the section has one."""
    title = escape(section.get("title", ""))
    link = section.get("link")
    if has_text(link):
        title = f'<a href="#{escape(link)}" class="section-title-link">{title}</a>'
    return f'<h2 class="section-title">{title}</h2>'


def wrap_section(section, kind: str, content: str) -> Markup:
    return Markup(
        f'<section class="section {kind}" id="{escape(section["id"])}">\n'
        f"{render_heading(section)}\n"
        f'<div class="section-content">\n{content}\n</div>\n'
        f"</section>\n"
    )


# ============================================================================
# PERSONAL HEADER
# ============================================================================

def render_personal(personal: dict) -> Markup:
    """Profile header: image, name and title, followed by the bio."""
    name = personal.get("name")
    header = []
    if has_text(personal.get("image")):
        header.append(
            f'<img class="profile-image" src="{escape(personal["image"])}"'
            f' alt="{escape(name or "")}">'
        )
    if has_text(name):
        header.append(f'<h1 class="name">{escape(name)}</h1>')
    if has_text(personal.get("title")):
        header.append(f'<p class="title">{escape(personal["title"])}</p>')

    html = '<section id="personal">\n<header>\n'
    html += "\n".join(header)
    html += "\n</header>\n"
    if has_text(personal.get("bio")):
        html += f'<main>\n<p class="bio">{escape(personal["bio"])}</p>\n</main>\n'
    html += "</section>\n"
    return Markup(html)


# ============================================================================
# TIMELINE
# ============================================================================

def render_details(details) -> Markup:
    if not details:
        return Markup("")
    items = "".join(f"<li>{escape(detail)}</li>" for detail in details)
    return Markup(f'<ul class="item-details">{items}</ul>')


def render_tags(tags) -> Markup:
    if not tags:
        return Markup("")
    spans = "".join(f'<span class="tag">{escape(tag)}</span>' for tag in tags)
    return Markup(f'<div class="item-tags">{spans}</div>')


def render_timeline_item(item: dict) -> str:
    """One timeline block; each optional part is left out when its field is empty."""
    heading = [f'<h3 class="item-title">{escape(item.get("title") or "")}</h3>']
    if has_text(item.get("subtitle")):
        heading.append(f'<span class="item-subtitle">{escape(item["subtitle"])}</span>')
    if has_text(item.get("location")):
        heading.append(
            f'<span class="item-location"> • {escape(item["location"])}</span>'
        )

    block = '<div class="item">\n<div class="item-header">\n<div>\n'
    block += "\n".join(heading)
    block += "\n</div>\n"
    if has_text(item.get("duration")):
        block += f'<span class="item-duration">{escape(item["duration"])}</span>\n'
    block += "</div>\n"

    if has_text(item.get("description")):
        block += f'<p class="item-description">{escape(item["description"])}</p>\n'
    if item.get("details"):
        block += f"{render_details(item['details'])}\n"
    if item.get("tags"):
        block += f"{render_tags(item['tags'])}\n"
    block += "</div>"

    url = item.get("url")
    if has_text(url):
        block = (
            f'<a href="{escape(url)}" class="item-link"{link_attrs(url)}>\n'
            f"{block}\n</a>"
        )
    return block


def render_timeline_section(section: dict) -> Markup:
    items = "\n".join(render_timeline_item(item) for item in section["items"])
    return wrap_section(section, "timeline", items)


# ============================================================================
# TAG CLOUD
# ============================================================================

def render_tags_section(section: dict) -> Markup:
    tags = "".join(f'<span class="tag">{escape(tag)}</span>' for tag in section["items"])
    return wrap_section(section, "tags", tags)


# ============================================================================
# CONTACT LINKS
# ============================================================================

def render_contact_link(link: dict) -> str:
    url = link.get("url") or ""
    label = link.get("label") or ""
    icon = link.get("icon")

    parts = []
    if is_image(icon):
        parts.append(
            f'<img src="{escape(icon)}" alt="{escape(label)}" class="contact-icon">'
        )
    elif has_text(icon):
        parts.append(f'<span class="contact-icon">{escape(icon)}</span>')
    if has_text(label):
        parts.append(f'<span class="contact-label">{escape(label)}</span>')

    return (
        f'<a href="{escape(url)}" class="contact-link"{link_attrs(url)}>'
        f'{"".join(parts)}</a>'
    )


def render_contact_section(section: dict) -> Markup:
    links = "\n".join(render_contact_link(link) for link in section["items"])
    return wrap_section(
        section, "contact", f'<div class="contact-links">\n{links}\n</div>'
    )


# ============================================================================
# FLOATING MENU
# ============================================================================

def render_menu(sections) -> Markup:
    """Menu with one link per rendered section, keyed by data-section for scroll highlighting."""
    if not sections:
        return Markup("")
    links = "\n".join(
        f'<a href="#{escape(s["id"])}" class="menu-link" data-section="{escape(s["id"])}">'
        f'{escape(s.get("title", ""))}</a>'
        for s in sections
    )
    return Markup(f'<nav class="floating-menu">\n{links}\n</nav>\n')

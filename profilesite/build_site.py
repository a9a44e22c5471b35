#!/usr/bin/env python3
"""
Profile Site Builder

Builds a single-page profile site from one data document using Jinja2
templates.

CONTENT SOURCE:
    data/data.json (or .yml)  → docs/index.html

TEMPLATES:
    templates/base.html   - Common page structure and effects bootstrap
    templates/index.html  - Floating menu and rendered sections
    templates/error.html  - Placeholder shown when the data cannot be loaded

USAGE:
    profilesite                        # Build from data/data.json
    profilesite data/cv.yml -o site    # Build from YAML into site/
    profilesite https://example.com/data.json
"""

import argparse
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from profilesite import config
from profilesite.assemble import assemble, collect_sections
from profilesite.loader import load_document
from profilesite.sections import is_renderable
from profilesite.fragments import render_menu


# ============================================================================
# CONFIGURATION
# ============================================================================

env = Environment(
    loader=FileSystemLoader(config.TEMPLATES_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)


# ============================================================================
# PAGE BUILDERS
# ============================================================================

def render_page(document: dict, effects=None, table=None, sections=None) -> str:
    """Full HTML page for a loaded document."""
    if sections is None:
        sections = collect_sections(document, table)
    context = {"title": config.DEFAULT_TITLE}
    body = assemble(document, context, sections=sections)

    # The menu only links sections that actually rendered
    rendered = [s for s in sections if is_renderable(s)]

    template = env.get_template("index.html")
    return template.render(
        body=body,
        menu=render_menu(rendered),
        effects=config.get_effects() if effects is None else effects,
        **context,
    )


def render_error_page(message: str = config.ERROR_MESSAGE) -> str:
    """Static placeholder page for a document that could not be loaded."""
    template = env.get_template("error.html")
    return template.render(title=config.DEFAULT_TITLE, message=message, effects=[])


def build(source=config.DEFAULT_SOURCE, output_dir=config.OUTPUT_DIR, table=None):
    """Load the document, render it and write index.html.

    Returns (output_file, ok) where ok is False if the error page was written.
    """
    print(f"Reading: {source}")
    document = load_document(source)

    sections = []
    if document is None:
        html = render_error_page()
    else:
        sections = collect_sections(document, table)
        html = render_page(document, sections=sections)

    output_file = Path(output_dir) / "index.html"
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(html, encoding="utf-8")
    print(f"  → {output_file}")

    if document is not None:
        rendered = sum(1 for s in sections if is_renderable(s))
        print(f"\nBuilt page with {rendered} sections")
    return output_file, document is not None


# ============================================================================
# MAIN
# ============================================================================

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build a profile page from a data document")
    parser.add_argument("source", nargs="?", default=config.DEFAULT_SOURCE,
                        help="Path or URL of the JSON/YAML data document")
    parser.add_argument("-o", "--output", default=str(config.OUTPUT_DIR),
                        help="Directory to write index.html into")
    args = parser.parse_args(argv)

    print("=" * 60)
    print("BUILDING SITE")
    print("=" * 60 + "\n")

    _, ok = build(args.source, args.output)

    print()
    print("=" * 60)
    print("BUILD COMPLETE" if ok else "BUILD FAILED")
    print("=" * 60)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

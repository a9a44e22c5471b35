"""Render a personal profile page from a single data document."""

from profilesite.assemble import assemble, collect_sections
from profilesite.errors import MissingDocument, ProfileSiteError, UnknownSectionType
from profilesite.loader import load_document
from profilesite.sections import SECTION_TABLE, dispatch

__version__ = "0.1.0"

__all__ = [
    "SECTION_TABLE",
    "MissingDocument",
    "ProfileSiteError",
    "UnknownSectionType",
    "assemble",
    "collect_sections",
    "dispatch",
    "load_document",
]

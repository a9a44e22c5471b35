"""
Configuration for the profile site builder.

Every setting is a module-level constant. A few can be overridden from the
environment so the builder can run from CI without editing files.
"""

import os
from pathlib import Path


# ============================================================================
# PATHS
# ============================================================================

PACKAGE_DIR = Path(__file__).resolve().parent
BASE_DIR = Path.cwd()
TEMPLATES_DIR = PACKAGE_DIR / "templates"

DEFAULT_SOURCE = os.environ.get("PROFILESITE_SOURCE", "data/data.json")
OUTPUT_DIR = Path(os.environ.get("PROFILESITE_OUTPUT", BASE_DIR / "docs"))


# ============================================================================
# LOADER
# ============================================================================

# Seconds to wait for a remote data document
FETCH_TIMEOUT = float(os.environ.get("PROFILESITE_TIMEOUT", "10"))

YAML_SUFFIXES = (".yml", ".yaml")


# ============================================================================
# RENDERING
# ============================================================================

# Links with these suffixes open in a new tab even when they are relative
NEW_CONTEXT_SUFFIXES = (".pdf",)

# Contact icons ending in one of these are drawn as <img>, anything else as text
IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp")

ERROR_MESSAGE = "Error loading site"

# <title> used when the document has no personal.name
DEFAULT_TITLE = "Profile"


# ============================================================================
# EFFECTS
# ============================================================================

# Client-side behaviours activated on page ready, in this order
DEFAULT_EFFECTS = ["typing", "parallax", "scroll", "hover", "menu"]


def get_effects():
    """Effects enabled for the page shell, from PROFILESITE_EFFECTS if set."""
    raw = os.environ.get("PROFILESITE_EFFECTS")
    if raw is None:
        return list(DEFAULT_EFFECTS)
    return [name.strip() for name in raw.split(",") if name.strip()]

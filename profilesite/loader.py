"""
Data loader: reads the site document from a file or URL.

A missing or unreadable document is reported and comes back as None; the
caller decides what to show instead. Pass strict=True to get a
MissingDocument exception instead.
"""

import http.client
import json
import urllib.request
from pathlib import Path

import yaml

from profilesite.config import FETCH_TIMEOUT, YAML_SUFFIXES
from profilesite.errors import MissingDocument


def is_url(source) -> bool:
    return str(source).startswith(("http://", "https://"))


def read_source(source) -> str:
    """Raw text of a path or http(s) URL. One attempt, no retry."""
    if is_url(source):
        req = urllib.request.Request(str(source), headers={"User-Agent": "profilesite"})
        with urllib.request.urlopen(req, timeout=FETCH_TIMEOUT) as response:
            return response.read().decode("utf-8")
    return Path(source).read_text(encoding="utf-8")


def parse_document(text: str, source="") -> dict:
    """Parse JSON, or YAML when the source name ends in .yml/.yaml."""
    name = str(source).split("?", 1)[0].lower()
    if name.endswith(YAML_SUFFIXES):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected an object at the top level, got {type(data).__name__}")
    return data


def load_document(source, strict=False):
    """Load and parse the site document; None (or MissingDocument) on failure."""
    try:
        return parse_document(read_source(source), source)
    except (OSError, ValueError, http.client.HTTPException, yaml.YAMLError) as e:
        if strict:
            raise MissingDocument(source, str(e)) from e
        print(f"  ⚠ Warning: Could not load {source}: {e}")
        return None

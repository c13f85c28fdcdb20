from typing import Optional

from .models import Metadata
from .parser import MISSING, parse_html


def _first(*candidates) -> Optional[str]:
    """First candidate backed by a real attribute; an empty og value still counts."""
    for value in candidates:
        if value is not None and value is not MISSING:
            return value
    return None


def extract_metadata(html: str) -> Metadata:
    """
    Build link-preview metadata from an HTML document.

    Open Graph tags win per field; <title> and <meta name="description">
    are the fallbacks. og:image has no fallback. Never raises on bad markup.
    """
    parsed = parse_html(html)

    return Metadata(
        title=_first(parsed["og_title"], parsed["title"]),
        description=_first(parsed["og_description"], parsed["description"]),
        image=_first(parsed["og_image"]),
    )

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# marks a tag that exists but has no content attribute
MISSING = object()


def _get_meta(soup: BeautifulSoup, name: str = None, prop: str = None):
    """
    Content of the first <meta> with the given name or property.
    None when there's no such tag, MISSING when the tag has no content attribute.
    """
    attrs = {"name": name} if name else {"property": prop}
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    content = tag.get("content")
    return MISSING if content is None else content


def _clean_text(raw: str) -> str:
    """Collapse whitespace and strip control characters from extracted text."""
    text = re.sub(r"[\r\n\t]+", " ", raw)
    text = re.sub(r" {2,}", " ", text)
    return text.strip()


def _make_soup(html: str) -> Optional[BeautifulSoup]:
    try:
        return BeautifulSoup(html or "", "lxml")
    except Exception as exc:
        # lxml is tolerant, but never let broken markup become an extraction error
        logger.warning("HTML parse failed, treating document as empty: %s", exc)
        return None


def parse_html(html: str) -> dict:
    """
    Parse raw HTML and return the raw preview signals.
    The extractor decides which of them wins for each field.
    """
    soup = _make_soup(html)
    if soup is None:
        return {"title": None, "description": None, "og_title": None, "og_description": None, "og_image": None}

    title_tag = soup.find("title")
    title = _clean_text(title_tag.get_text()) if title_tag else None

    return {
        "title": title,
        "description": _get_meta(soup, name="description"),
        "og_title": _get_meta(soup, prop="og:title"),
        "og_description": _get_meta(soup, prop="og:description"),
        "og_image": _get_meta(soup, prop="og:image"),
    }

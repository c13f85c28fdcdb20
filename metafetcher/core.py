import logging

from .errors import RobotsDisallowed
from .extractor import extract_metadata
from .fetcher import USER_AGENT, fetch_page, validate_url
from .models import Metadata
from .robots import is_fetch_allowed

logger = logging.getLogger(__name__)


def fetch_metadata(url: str) -> Metadata:
    """
    Top-level entry point. Checks robots.txt, then fetches and extracts metadata.
    Errors are raised to the caller as MetaFetchError subclasses; the page is
    never requested when robots.txt forbids it.
    """
    url = validate_url(url)
    if not is_fetch_allowed(url, USER_AGENT):
        raise RobotsDisallowed(f"robots.txt disallows crawling {url}")
    return fetch_metadata_unchecked(url)


def fetch_metadata_unchecked(url: str) -> Metadata:
    """Fetch and extract without consulting robots.txt; compliance is the caller's job."""
    html = fetch_page(url, user_agent=USER_AGENT)
    metadata = extract_metadata(html)
    logger.debug("Extracted metadata for %s: %s", url, metadata)
    return metadata

import logging
from urllib.parse import urlparse

import requests

from .errors import DecodeError, HttpError, InvalidUrl, NetworkError

logger = logging.getLogger(__name__)

# one identity for robots.txt matching and for every request we send
USER_AGENT = "MetaFetcher/1.0"

DEFAULT_TIMEOUT = 15  # seconds
MAX_CONTENT_CHARS = 5 * 1024 * 1024  # decoded text handed to the parser is capped here

_ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str) -> str:
    """Reject anything that isn't an absolute http(s) URL with a host."""
    if not url or not isinstance(url, str):
        raise InvalidUrl(f"invalid URL: {url!r}")
    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname
    except ValueError as exc:
        # bad ports and unbalanced brackets surface here
        raise InvalidUrl(f"invalid URL: {url!r}") from exc
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES or not host:
        raise InvalidUrl(f"invalid URL: {url!r}")
    return url.strip()


def http_get(url: str, user_agent: str, timeout: float = DEFAULT_TIMEOUT) -> requests.Response:
    """
    Single GET shared by the robots lookup and the page fetch.
    Redirects are followed by requests; transport errors are left to the caller.
    """
    headers = {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    return requests.get(url, headers=headers, timeout=timeout, allow_redirects=True)


def decode_body(response: requests.Response) -> str:
    """
    Decode the raw body strictly. requests' .text never fails (it replaces bad
    bytes), so use the declared charset, or UTF-8 when the server sent none.
    """
    content_type = response.headers.get("Content-Type", "")
    encoding = response.encoding if "charset" in content_type.lower() and response.encoding else "utf-8"
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise DecodeError(f"cannot decode body of {response.url} as {encoding}") from exc


def fetch_page(url: str, user_agent: str = USER_AGENT) -> str:
    """
    Fetch the HTML of a URL and return it as text.

    Raises NetworkError when the host can't be reached (timeouts included),
    HttpError on a non-2xx response and DecodeError when the body isn't text.
    """
    url = validate_url(url)
    try:
        response = http_get(url, user_agent)
    except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema) as exc:
        raise InvalidUrl(f"invalid URL: {url!r}") from exc
    except requests.RequestException as exc:
        raise NetworkError(f"failed to reach {url}: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise HttpError(response.status_code, url)

    logger.debug("Fetched %s -> %s (%d bytes)", url, response.url, len(response.content))
    text = decode_body(response)
    if len(text) > MAX_CONTENT_CHARS:
        logger.debug("Truncating %s from %d to %d characters", url, len(text), MAX_CONTENT_CHARS)
        text = text[:MAX_CONTENT_CHARS]
    return text

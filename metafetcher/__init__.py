from .core import fetch_metadata, fetch_metadata_unchecked
from .errors import (
    DecodeError,
    HttpError,
    InvalidUrl,
    MetaFetchError,
    NetworkError,
    PolicyParseError,
    RobotsDisallowed,
)
from .extractor import extract_metadata
from .fetcher import USER_AGENT, fetch_page
from .models import Metadata
from .robots import RobotsPolicy, parse_policy, resolve_robots_url

__all__ = [
    "fetch_metadata",
    "fetch_metadata_unchecked",
    "fetch_page",
    "extract_metadata",
    "parse_policy",
    "resolve_robots_url",
    "RobotsPolicy",
    "Metadata",
    "USER_AGENT",
    "MetaFetchError",
    "InvalidUrl",
    "NetworkError",
    "HttpError",
    "DecodeError",
    "PolicyParseError",
    "RobotsDisallowed",
]

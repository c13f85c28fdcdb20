from typing import Optional


class MetaFetchError(Exception):
    """Base class for everything fetch_metadata can raise."""

    code = "metafetch_error"


class InvalidUrl(MetaFetchError, ValueError):
    code = "invalid_url"


class NetworkError(MetaFetchError, ConnectionError):
    code = "network_error"


class HttpError(MetaFetchError):
    code = "http_error"

    def __init__(self, status: int, url: Optional[str] = None):
        self.status = status
        self.url = url
        target = f" for {url}" if url else ""
        super().__init__(f"HTTP {status}{target}")


class DecodeError(MetaFetchError):
    code = "decode_error"


class PolicyParseError(MetaFetchError):
    code = "policy_parse_error"


# robots blocks are also PermissionErrors
class RobotsDisallowed(MetaFetchError, PermissionError):
    code = "robots_disallowed"

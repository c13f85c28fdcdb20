from unittest.mock import MagicMock

import pytest


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects returned by a patched requests.get."""

    def _make(body="", status_code=200, content_type="text/html; charset=utf-8", url="https://example.com/"):
        response = MagicMock()
        response.status_code = status_code
        response.url = url
        response.headers = {"Content-Type": content_type}
        response.content = body.encode("utf-8") if isinstance(body, str) else body
        response.encoding = None
        if "charset=" in content_type:
            response.encoding = content_type.split("charset=", 1)[1].strip()
        return response

    return _make

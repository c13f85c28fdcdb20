import time
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One log line per request. Failed previews are logged at WARNING together
    with the error code the exception handler left on request.state.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration_ms = int((time.time() - start) * 1000)

        error_code = getattr(request.state, "error_code", None)
        if error_code:
            logger.warning(
                "%s %s -> %d %s (%dms)",
                request.method,
                request.url.path,
                response.status_code,
                error_code,
                duration_ms,
            )
        else:
            logger.info(
                "%s %s -> %d (%dms)",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )
        return response

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from metafetcher import InvalidUrl, MetaFetchError, RobotsDisallowed
from .middleware import RequestLoggingMiddleware
from .routes import router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Link Preview Metadata Fetcher",
    description=(
        "Given any URL, returns link-preview metadata (title, description, image) "
        "from Open Graph tags with a standard HTML fallback, honouring robots.txt."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestLoggingMiddleware)


def _status_for(exc: MetaFetchError) -> int:
    if isinstance(exc, InvalidUrl):
        return 422
    if isinstance(exc, RobotsDisallowed):
        return 403
    # everything else is an upstream problem: unreachable, bad status, undecodable
    return 502


@app.exception_handler(MetaFetchError)
async def metafetch_exception_handler(request: Request, exc: MetaFetchError):
    status_code = _status_for(exc)
    # picked up by RequestLoggingMiddleware
    request.state.error_code = exc.code
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "code": exc.code})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred.", "code": "internal_error"},
    )


app.include_router(router)

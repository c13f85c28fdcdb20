import asyncio
import logging

from fastapi import APIRouter

from metafetcher import fetch_metadata, fetch_metadata_unchecked
from .schemas import ErrorResponse, HealthResponse, PreviewRequest, PreviewResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/preview",
    response_model=PreviewResponse,
    responses={403: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    summary="Fetch link-preview metadata for a URL",
)
async def preview_url(request: PreviewRequest) -> PreviewResponse:
    """
    Accepts a URL and returns its title, description and preview image.

    - Respects robots.txt by default (`respect_robots: true`).
    - Set `respect_robots: false` to skip the robots.txt check.
    """
    fetch = fetch_metadata if request.respect_robots else fetch_metadata_unchecked

    # the fetch is blocking; keep it off the event loop
    loop = asyncio.get_running_loop()
    metadata = await loop.run_in_executor(None, fetch, request.url)

    logger.info("Preview for %s: title=%r", request.url, metadata.title)
    return PreviewResponse(url=request.url, **metadata.to_dict())


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok")

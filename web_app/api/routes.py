"""API routes implementation."""

from fastapi import APIRouter, Request, Query, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from typing import Optional

from .schemas import (
    ErrorResponse,
    URLInfoResponse,
    URLListResponse,
    HealthResponse,
    StatisticsResponse,
)
from shortener.exceptions import NotFoundError

router = APIRouter()


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    return StatisticsResponse(**service.get_statistics())


@router.get(
    "/stats/{short_code}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL statistics",
    description="Get the original URL, click count and creation time of a short code.",
)
async def get_url_stats(request: Request, short_code: str):
    """Get statistics for one short URL. Does not count as a click."""
    service = request.app.state.service

    try:
        entry = service.get_url_info(short_code)
    except NotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error="Short URL not found").model_dump(),
        )

    return URLInfoResponse(
        original_url=entry.original_url,
        short_code=entry.code,
        clicks=entry.clicks,
        created_at=entry.created_at,
    )


@router.get(
    "/urls",
    response_model=URLListResponse,
    summary="List URLs",
    description="List short URLs in creation order (oldest first) with click counts.",
)
async def list_urls(
    request: Request,
    limit: Optional[int] = Query(None, ge=0, le=1000, description="Maximum number of entries"),
):
    """List recent short URLs."""
    service = request.app.state.service
    config = request.app.state.config

    if limit is None:
        limit = config.recent_list_limit

    return URLListResponse(**service.list_recent_urls(limit))


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    service = request.app.state.service

    health = service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        registry="healthy" if health["registry"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )

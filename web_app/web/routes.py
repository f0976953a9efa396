"""Public routes: shorten, redirect and a plain health probe."""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import JSONResponse, RedirectResponse

from ..api.schemas import ShortenRequest, ShortenResponse, ShortenErrorResponse
from shortener.common.url_builder import build_short_url
from shortener.exceptions import InvalidURLError, NotFoundError, CodeSpaceExhaustedError

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ShortenErrorResponse, "description": "Invalid URL"},
        500: {"description": "No free short code could be generated"},
    },
    summary="Create short URL",
    description="Shorten a URL. Submitting the same URL again returns the existing short code.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create or reuse a short URL."""
    service = request.app.state.service
    config = request.app.state.config

    try:
        result = service.create_short_url(body.url)
    except InvalidURLError as e:
        error = ShortenErrorResponse(error="Please provide a valid URL", detail=e.reason)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.model_dump(),
        )
    except CodeSpaceExhaustedError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal error: {str(e)}",
        )

    short_url = build_short_url(
        short_code=result["short_code"],
        base_url=config.base_url,
        path_prefix=config.path_prefix,
    )

    return ShortenResponse(
        short_code=result["short_code"],
        short_url=short_url,
        original_url=result["original_url"],
        is_new=result["is_new"],
        total_urls=result["total_urls"],
    )


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = service.health_check()

    if health["overall"]:
        return {"status": "healthy"}
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )


# Catch-all: must stay the last route registered on this router
@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = service.get_original_url(short_code)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found",
        )

    # Perform 302 redirect (temporary redirect for tracking)
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)

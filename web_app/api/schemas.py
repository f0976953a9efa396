"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    Not validated here: missing, non-string and malformed URLs are all
    rejected by the registry with the same error.
    """

    url: Any = Field(None, description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    success: bool = Field(True, description="Always true on success")
    short_code: str = Field(..., description="The assigned short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The original long URL")
    is_new: bool = Field(..., description="False when an existing code was reused")
    total_urls: int = Field(..., description="Total number of short URLs")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "short_code": "3fa9c1",
                    "short_url": "http://localhost:5000/3fa9c1",
                    "original_url": "https://example.com/very/long/path",
                    "is_new": True,
                    "total_urls": 1,
                }
            ]
        }
    }


class ShortenErrorResponse(BaseModel):
    """Response when a URL cannot be shortened."""

    success: bool = False
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")


class URLInfoResponse(BaseModel):
    """Response with URL statistics."""

    original_url: str
    short_code: str
    clicks: int
    created_at: datetime


class URLListResponse(BaseModel):
    """Recent URLs, oldest first."""

    urls: List[URLInfoResponse]
    total_urls: int
    limit: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    registry: str = Field(..., description="Registry status")
    timestamp: datetime = Field(..., description="Check timestamp")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    total_clicks: int
    storage: str


class ErrorResponse(BaseModel):
    """Error response for lookups."""

    error: str = Field(..., description="Error message")

"""Core business logic for the link shortener."""

from .shortcode import ShortCodeGenerator
from .models import Entry
from .registry import ShortenerRegistry
from .service import URLShortenerService
from .exceptions import (
    ShortenerError,
    InvalidURLError,
    NotFoundError,
    CodeSpaceExhaustedError,
)

__all__ = [
    "ShortCodeGenerator",
    "Entry",
    "ShortenerRegistry",
    "URLShortenerService",
    "ShortenerError",
    "InvalidURLError",
    "NotFoundError",
    "CodeSpaceExhaustedError",
]

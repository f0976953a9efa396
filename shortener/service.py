"""Service layer used by the HTTP boundary."""

import logging
from typing import Optional, Dict, Any

from .registry import ShortenerRegistry
from .models import Entry
from .exceptions import InvalidURLError, NotFoundError, CodeSpaceExhaustedError


class URLShortenerService:
    """Service layer wrapping the registry with logging and result shaping."""

    def __init__(
        self,
        registry: ShortenerRegistry,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL shortener service.

        Args:
            registry: The registry owning all mappings
            logger: Optional logger
        """
        self.registry = registry
        self.logger = logger or logging.getLogger(__name__)

    def create_short_url(self, original_url: str) -> Dict[str, Any]:
        """Create a short URL, or reuse the existing one for the same URL.

        Args:
            original_url: The original long URL

        Returns:
            Dictionary with short_code, original_url, is_new, created_at, total_urls

        Raises:
            InvalidURLError: If validation fails
            CodeSpaceExhaustedError: If no free code could be generated
        """
        try:
            short_code, is_new = self.registry.create_or_reuse(original_url)
        except InvalidURLError as e:
            self.logger.debug(f"Rejected URL {original_url!r}: {e.reason}", extra={"reason": e.reason})
            raise
        except CodeSpaceExhaustedError as e:
            self.logger.error(f"Short code space exhausted: {e}")
            raise

        entry = self.registry.stats(short_code)

        if is_new:
            self.logger.info(f"Created short URL: {short_code} -> {original_url}", extra={"short_code": short_code})
        else:
            self.logger.debug(f"Reused short URL: {short_code} -> {original_url}", extra={"short_code": short_code})

        return {
            "short_code": short_code,
            "original_url": entry.original_url,
            "is_new": is_new,
            "created_at": entry.created_at,
            "total_urls": self.registry.count(),
        }

    def get_original_url(self, short_code: str) -> str:
        """Get the original URL for a short code, counting the click.

        Raises:
            NotFoundError: If the code does not exist
        """
        try:
            entry = self.registry.resolve_and_count_click(short_code)
        except NotFoundError:
            self.logger.info(f"Short code not found: {short_code}", extra={"short_code": short_code})
            raise

        self.logger.debug(
            f"Resolved {short_code} -> {entry.original_url}",
            extra={"short_code": short_code, "clicks": entry.clicks},
        )
        return entry.original_url

    def get_url_info(self, short_code: str) -> Entry:
        """Get information about a short URL without counting a click."""
        return self.registry.stats(short_code)

    def list_recent_urls(self, limit: int = 10) -> Dict[str, Any]:
        """List URLs in creation order.

        Args:
            limit: Maximum number to return

        Returns:
            Dictionary with urls, total_urls and limit
        """
        entries = self.registry.list_recent(limit)
        return {
            "urls": [entry.to_dict() for entry in entries],
            "total_urls": self.registry.count(),
            "limit": limit,
        }

    def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics."""
        return {
            "total_urls": self.registry.count(),
            "total_clicks": self.registry.total_clicks(),
            "storage": "memory",
        }

    def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        The registry is process memory, so it is healthy as long as it answers.
        """
        try:
            self.registry.count()
            registry_healthy = True
        except Exception as e:
            self.logger.error(f"Registry health check failed: {e}")
            registry_healthy = False

        return {
            "registry": registry_healthy,
            "overall": registry_healthy,
        }

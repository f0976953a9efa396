"""In-memory registry mapping short codes to URLs."""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from .models import Entry
from .shortcode import ShortCodeGenerator
from .exceptions import InvalidURLError, NotFoundError, CodeSpaceExhaustedError
from .common.validators import is_valid_url


class ShortenerRegistry:
    """Owns every short code mapping for the life of the process.

    All mutation and lookup happens under one lock. None of the operations
    block or yield while holding it, so the same registry is safe to share
    between threadpool handlers and coroutines on the event loop.
    """

    def __init__(
        self,
        generator: Optional[ShortCodeGenerator] = None,
        max_attempts: int = 1000,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize an empty registry.

        Args:
            generator: Short code generator (6 hex characters if not given)
            max_attempts: Maximum codes drawn per creation before giving up
            logger: Optional logger
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.generator = generator or ShortCodeGenerator()
        self.max_attempts = max_attempts
        self.logger = logger or logging.getLogger(__name__)

        # dicts keep insertion order, which list_recent relies on
        self._entries: Dict[str, Entry] = {}
        self._codes_by_url: Dict[str, str] = {}
        self._lock = threading.Lock()

    def generate_code(self) -> str:
        """Draw a candidate short code. Reads no registry state."""
        return self.generator.generate_random()

    def create_or_reuse(self, url: str) -> Tuple[str, bool]:
        """Return the code for ``url``, creating an entry if it is new.

        Args:
            url: The original URL, stored verbatim

        Returns:
            Tuple of (short_code, is_new)

        Raises:
            InvalidURLError: If the URL is missing or not a valid absolute URL
            CodeSpaceExhaustedError: If no free code was found
        """
        is_valid, error = is_valid_url(url)
        if not is_valid:
            raise InvalidURLError(error)

        with self._lock:
            existing = self._codes_by_url.get(url)
            if existing is not None:
                return existing, False

            code = self._draw_free_code()
            self._entries[code] = Entry(
                code=code,
                original_url=url,
                created_at=datetime.now(timezone.utc),
            )
            self._codes_by_url[url] = code
            return code, True

    def resolve_and_count_click(self, code: str) -> Entry:
        """Look up ``code`` and record one click.

        Returns:
            Snapshot of the entry after the increment

        Raises:
            NotFoundError: If the code does not exist
        """
        with self._lock:
            entry = self._entries.get(code)
            if entry is None:
                raise NotFoundError(code)

            entry = replace(entry, clicks=entry.clicks + 1)
            self._entries[code] = entry
            return entry

    def stats(self, code: str) -> Entry:
        """Return the entry for ``code`` without counting a click.

        Raises:
            NotFoundError: If the code does not exist
        """
        with self._lock:
            entry = self._entries.get(code)
        if entry is None:
            raise NotFoundError(code)
        return entry

    def list_recent(self, limit: int = 10) -> List[Entry]:
        """List entries in insertion order (oldest first), up to ``limit``."""
        if limit < 0:
            raise ValueError("limit must not be negative")

        with self._lock:
            entries = list(self._entries.values())
        return entries[:limit]

    def count(self) -> int:
        """Total number of entries."""
        with self._lock:
            return len(self._entries)

    def total_clicks(self) -> int:
        """Sum of clicks across all entries."""
        with self._lock:
            return sum(entry.clicks for entry in self._entries.values())

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._entries

    def _draw_free_code(self) -> str:
        # Caller holds self._lock
        for attempt in range(1, self.max_attempts + 1):
            code = self.generate_code()
            if code not in self._entries:
                if attempt > 1:
                    self.logger.debug(f"Generated code after {attempt} attempts: {code}")
                return code

        raise CodeSpaceExhaustedError(self.max_attempts)

"""Data models for the link shortener."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Entry:
    """A short code mapping, as handed out by the registry.

    Instances are immutable; the registry swaps in a new instance on every
    click so snapshots held by callers never change underneath them.
    """

    code: str
    original_url: str
    created_at: datetime
    clicks: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "short_code": self.code,
            "original_url": self.original_url,
            "created_at": self.created_at.isoformat(),
            "clicks": self.clicks,
        }

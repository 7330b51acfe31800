"""Posts returned by the upstream source and the timestamp batch built from them.

A Post is what the source delivered, verbatim.  Its ``created_at`` is kept
as the raw string so a malformed value surfaces as a TimestampParseError
at estimation time instead of being rejected at the source boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from pydantic import BaseModel, Field

# Twitter v1.1 format, e.g. "Wed Oct 10 20:19:24 +0000 2018"
TWITTER_TIME_FORMAT = "%a %b %d %H:%M:%S %z %Y"


class TimestampParseError(Exception):
    """Raised when a post's creation time cannot be interpreted."""

    def __init__(self, post_id: str, raw: str) -> None:
        self.post_id = post_id
        self.raw = raw
        super().__init__(f"Cannot parse created_at of post '{post_id}': {raw!r}")


def parse_created_at(raw: str) -> datetime:
    """Parse a source timestamp into an aware UTC datetime.

    Accepts the Twitter format first and ISO-8601 as a fallback.

    Raises:
        ValueError: If neither format matches.
    """
    try:
        parsed = datetime.strptime(raw, TWITTER_TIME_FORMAT)
    except ValueError:
        parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class Post(BaseModel):
    """A single item matching the sampled keyword."""

    post_id: str = Field("", description="Identifier assigned by the source")
    created_at: str = Field(..., description="Creation time exactly as the source sent it")
    text: str = ""

    model_config = {"frozen": True}

    def timestamp(self) -> datetime:
        """Creation time as an aware UTC datetime.

        Raises:
            TimestampParseError: If ``created_at`` is not a known format.
        """
        try:
            return parse_created_at(self.created_at)
        except (TypeError, ValueError) as exc:
            raise TimestampParseError(self.post_id, self.created_at) from exc


@dataclass(frozen=True)
class EventBatch:
    """Event timestamps from one sampler tick, newest-first as delivered."""

    timestamps: tuple[datetime, ...]

    @classmethod
    def from_posts(cls, posts: Iterable[Post]) -> EventBatch:
        """Parse every post; the whole batch fails on the first bad timestamp."""
        return cls(tuple(post.timestamp() for post in posts))

    def __len__(self) -> int:
        return len(self.timestamps)

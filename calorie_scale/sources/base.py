"""Abstract base for upstream event sources.

An event source answers one question: which recent posts match a query.

Architectural rules:
    1. search() returns posts in the order the upstream delivered them.
    2. Timestamps are NOT parsed here; Post.timestamp() does that lazily.
    3. Every failure of the call itself is raised as SourceError.
    4. Sources never retry; the sampler simply waits for its next tick.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from calorie_scale.domain.event import Post


class SourceError(Exception):
    """Raised when the upstream call fails (network, auth, rate limit, payload)."""

    def __init__(self, operation: str, query: str, reason: str) -> None:
        self.operation = operation
        self.query = query
        self.reason = reason
        super().__init__(f"{operation} failed for query {query!r}: {reason}")


class EventSource(ABC):
    """Base class for anything that can be searched for recent posts."""

    @abstractmethod
    async def search(self, query: str, result_type: str, count: int) -> list[Post]:
        """Return up to *count* posts matching *query*, newest-first.

        Args:
            query: Search expression, e.g. a hashtag.
            result_type: Freshness hint understood by the upstream ("recent").
            count: Maximum number of posts to return.

        Raises:
            SourceError: If the call fails or the response is unusable.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Human-readable name of the upstream."""
        ...

    async def aclose(self) -> None:
        """Release any network resources held by the source."""

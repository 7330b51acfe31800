"""Twitter v1.1 standard search over httpx.

Authentication uses the OAuth2 client-credentials grant: the client id and
secret are exchanged once for an app-only bearer token, which is cached
until the API answers 401.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from calorie_scale.domain.event import Post
from calorie_scale.sources.base import EventSource, SourceError

logger = logging.getLogger(__name__)

TOKEN_URL = "https://api.twitter.com/oauth2/token"
SEARCH_URL = "https://api.twitter.com/1.1/search/tweets.json"


class TwitterSearchSource(EventSource):
    """Searches recent tweets for a keyword.

    Args:
        client_id: OAuth2 client id (API key).
        client_secret: OAuth2 client secret (API secret key).
        timeout: Per-request timeout in seconds.
        client: Pre-built httpx client, mainly for tests.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._token: str | None = None

    @property
    def source_name(self) -> str:
        return "twitter"

    async def search(self, query: str, result_type: str = "recent", count: int = 100) -> list[Post]:
        try:
            token = await self._bearer_token(query)
            response = await self._client.get(
                SEARCH_URL,
                params={"q": query, "result_type": result_type, "count": count},
                headers={"Authorization": f"Bearer {token}"},
            )
            if response.status_code == httpx.codes.UNAUTHORIZED:
                self._token = None
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise SourceError(
                "search", query, f"HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceError("search", query, f"{type(exc).__name__}: {exc}") from exc
        except ValueError as exc:
            raise SourceError("search", query, f"invalid JSON body: {exc}") from exc

        return self._parse_statuses(query, payload)

    async def aclose(self) -> None:
        await self._client.aclose()

    # ── Internals ────────────────────────────────────────────────────────

    async def _bearer_token(self, query: str) -> str:
        if self._token is not None:
            return self._token

        response = await self._client.post(
            TOKEN_URL,
            auth=(self._client_id, self._client_secret),
            data={"grant_type": "client_credentials"},
        )
        if response.is_error:
            raise SourceError("token", query, f"HTTP {response.status_code}")

        body = response.json()
        token = body.get("access_token") if isinstance(body, dict) else None
        if not token or str(body.get("token_type", "")).lower() != "bearer":
            raise SourceError("token", query, "response carried no bearer token")

        logger.info("Obtained bearer token for %s", self.source_name)
        self._token = token
        return token

    @staticmethod
    def _parse_statuses(query: str, payload: Any) -> list[Post]:
        statuses = payload.get("statuses") if isinstance(payload, dict) else None
        if not isinstance(statuses, list):
            raise SourceError("search", query, "response has no 'statuses' list")

        try:
            return [
                Post(
                    post_id=str(status.get("id_str") or status.get("id") or ""),
                    created_at=str(status.get("created_at", "")),
                    text=str(status.get("text", "")),
                )
                for status in statuses
            ]
        except (AttributeError, ValidationError) as exc:
            raise SourceError("search", query, f"malformed status: {exc}") from exc

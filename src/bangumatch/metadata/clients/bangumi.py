"""Bangumi episode catalog client.

Implements the EpisodeCatalog interface for the Bangumi v0 API
(https://bangumi.github.io/api/).
"""

from decimal import Decimal
from http import HTTPStatus
from typing import Any

import httpx

from bangumatch.metadata.base import EpisodeCatalog
from bangumatch.metadata.settings import Settings
from bangumatch.models.core import CanonicalEpisode
from bangumatch.utils.debug import debug

# Bangumi episode types: 0 main story, 1 SP, 2 OP, 3 ED.
EPISODE_TYPE_MAIN = 0


def episode_from_json(data: dict[str, Any]) -> CanonicalEpisode:
    """Convert a Bangumi episode object into a CanonicalEpisode."""
    return CanonicalEpisode(
        id=str(data["id"]),
        parent_series_id=str(data["subject_id"]),
        order=Decimal(str(data.get("sort", 0))),
        air_date=data.get("airdate") or None,
        name=data.get("name") or "",
        name_cn=data.get("name_cn") or "",
        description=data.get("desc") or None,
        episode_type=data.get("type", EPISODE_TYPE_MAIN),
    )


class BangumiClient(EpisodeCatalog):
    """Async client for the Bangumi episode endpoints."""

    PAGE_SIZE = 100

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.BANGUMI_API_URL,
            headers=self.settings.auth_headers(),
            timeout=self.settings.BANGUMI_TIMEOUT,
        )

    async def fetch_episode(self, episode_id: str) -> CanonicalEpisode | None:
        """Fetch one episode; returns None when Bangumi answers 404."""
        async with self._client() as client:
            resp = await client.get(f"/v0/episodes/{episode_id}")
            if resp.status_code == HTTPStatus.NOT_FOUND:
                debug(f"episode #{episode_id} not found")
                return None
            resp.raise_for_status()
            return episode_from_json(resp.json())

    async def _fetch_page(
        self, client: httpx.AsyncClient, series_id: str, offset: int
    ) -> dict[str, Any] | None:
        resp = await client.get(
            "/v0/episodes",
            params={
                "subject_id": series_id,
                "type": EPISODE_TYPE_MAIN,
                "limit": self.PAGE_SIZE,
                "offset": offset,
            },
        )
        if resp.status_code == HTTPStatus.NOT_FOUND:
            return None
        resp.raise_for_status()
        return resp.json()

    async def fetch_episode_list(
        self, series_id: str, index_hint: int
    ) -> list[CanonicalEpisode] | None:
        """Fetch the main episodes of a subject, ascending by order.

        The first page is always loaded. When *index_hint* points past it, the
        page that should contain the hint (clamped to the last page) is loaded
        as well, so at most two requests are made.

        Args:
            series_id: Bangumi subject id.
            index_hint: Best current index estimate.

        Returns:
            The episodes, or None when the subject is unknown or has none.
        """
        async with self._client() as client:
            first = await self._fetch_page(client, series_id, 0)
            if first is None:
                return None
            items = list(first.get("data") or [])
            total = first.get("total", len(items))

            if index_hint > self.PAGE_SIZE and total > self.PAGE_SIZE:
                offset = min(index_hint - 1, total - 1) // self.PAGE_SIZE * self.PAGE_SIZE
                if offset > 0:
                    debug(f"subject #{series_id}: loading episodes from offset {offset}")
                    page = await self._fetch_page(client, series_id, offset)
                    if page is not None:
                        items.extend(page.get("data") or [])

        if not items:
            return None
        episodes = [episode_from_json(item) for item in items]
        return sorted(episodes, key=lambda episode: episode.order)

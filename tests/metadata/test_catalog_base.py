"""Tests for the EpisodeCatalog base interface.

Covers expected usage and failure modes for the abstract catalog interface.
"""

import pytest

from bangumatch.metadata.base import EpisodeCatalog
from bangumatch.models.core import CanonicalEpisode


class DummyCatalog(EpisodeCatalog):
    """Dummy implementation for testing the abstract base class."""

    async def fetch_episode(self, episode_id: str) -> CanonicalEpisode | None:
        return CanonicalEpisode(id=episode_id, parent_series_id="1", order=1)

    async def fetch_episode_list(
        self, series_id: str, index_hint: int
    ) -> list[CanonicalEpisode] | None:
        return [CanonicalEpisode(id="1", parent_series_id=series_id, order=index_hint)]


@pytest.mark.asyncio
async def test_expected_flow_fetch_episode_and_list() -> None:
    """Expected flow: DummyCatalog returns canonical episodes."""
    catalog = DummyCatalog()
    episode = await catalog.fetch_episode("42")
    assert episode is not None
    assert episode.id == "42"
    episodes = await catalog.fetch_episode_list("7", 3)
    assert episodes is not None
    assert episodes[0].parent_series_id == "7"


def test_cannot_instantiate_abstract_base() -> None:
    """Failure: EpisodeCatalog cannot be instantiated directly."""
    with pytest.raises(TypeError):
        EpisodeCatalog()  # type: ignore[abstract]


class IncompleteCatalog(EpisodeCatalog):
    """Subclass missing fetch_episode_list."""

    async def fetch_episode(self, episode_id: str) -> CanonicalEpisode | None:
        return None


def test_incomplete_subclass_raises() -> None:
    """Failure: a subclass must implement every abstract method."""
    with pytest.raises(TypeError):
        IncompleteCatalog()  # type: ignore[abstract]

"""Base abstraction for episode catalog clients.

Defines the two lookups the episode matcher needs from a remote catalog. The
Bangumi client implements it; tests use an in-memory fake. Implementations
must not swallow transport failures: they propagate to the caller unchanged.
"""

from abc import ABC, abstractmethod

from bangumatch.models.core import CanonicalEpisode


class EpisodeCatalog(ABC):
    """Abstract base class for all episode catalog clients.

    Used for dependency injection and testability of the matcher.
    """

    @abstractmethod
    async def fetch_episode(self, episode_id: str) -> CanonicalEpisode | None:
        """Fetch a single canonical episode by its catalog id.

        Args:
            episode_id: The episode id in the catalog.

        Returns:
            The episode, or None if the catalog does not know it.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError

    @abstractmethod
    async def fetch_episode_list(
        self, series_id: str, index_hint: int
    ) -> list[CanonicalEpisode] | None:
        """Fetch the episodes of a series, ascending by order.

        Args:
            series_id: The series (subject) id in the catalog.
            index_hint: Best current index estimate, used to bound pagination.

        Returns:
            The episodes, or None if the series has none.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError

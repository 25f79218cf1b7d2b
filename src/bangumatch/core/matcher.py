"""Episode matcher: turns a resolved index into a canonical episode.

A known episode id is trusted when its parent series matches (or the file is
a special). Otherwise the series' episode list is fetched, the index is
re-resolved against the now known upper bound and the list is searched for
the entry with that order.
"""

import asyncio

from bangumatch.core.resolver import advisory_for, resolve_index
from bangumatch.metadata.base import EpisodeCatalog
from bangumatch.models.core import (
    Advisory,
    AdvisoryKind,
    CanonicalEpisode,
    IndexSource,
    MatchOutcome,
    ResolvedIndex,
)


class ResolutionCancelledError(Exception):
    """Raised when a cancellation signal is observed at a fetch checkpoint."""


def _checkpoint(cancel_event: asyncio.Event | None) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise ResolutionCancelledError("episode resolution cancelled")


def find_by_order(
    episodes: list[CanonicalEpisode], index: int
) -> CanonicalEpisode | None:
    """Return the first episode whose truncated order equals *index*.

    Fractional orders are truncated, so ``12.5`` matches index 12; when several
    entries truncate to the same index the earliest in list order wins.
    """
    for episode in episodes:
        if int(episode.order) == index:
            return episode
    return None


async def match_episode(
    catalog: EpisodeCatalog,
    series_id: str,
    index: ResolvedIndex,
    *,
    known_episode_id: str | None = None,
    special: bool = False,
    extracted: int | None = None,
    file_name: str = "",
    always_replace: bool = False,
    search_list: bool = True,
    cancel_event: asyncio.Event | None = None,
) -> MatchOutcome:
    """Match a file to a canonical episode.

    Args:
        catalog: Episode catalog collaborator.
        series_id: Catalog id of the file's series.
        index: Index from the first resolver pass.
        known_episode_id: Catalog episode id already attached to the file.
        special: Whether the file carries a Special/OVA/OAD marker.
        extracted: Number extracted from the file name, for the bound-aware pass.
        file_name: File name, used in advisory messages.
        always_replace: Override policy for the bound-aware pass.
        search_list: When False only the known id is tried; without a usable
            id the outcome is empty and no list is fetched.
        cancel_event: When set, resolution aborts at the next fetch.

    Returns:
        The matched episode (or none) with the final index and any advisories.

    Raises:
        ResolutionCancelledError: If *cancel_event* is set at a checkpoint.
    """
    advisories: list[Advisory] = []

    if known_episode_id:
        _checkpoint(cancel_event)
        candidate = await catalog.fetch_episode(known_episode_id)
        if candidate is not None:
            if special or candidate.parent_series_id == series_id:
                return MatchOutcome(episode=candidate, index=index)
            advisories.append(
                Advisory(
                    kind=AdvisoryKind.PARENT_MISMATCH,
                    message=(
                        f"episode #{known_episode_id} does not belong to "
                        f"series #{series_id}, ignored"
                    ),
                )
            )

    if not search_list:
        return MatchOutcome(advisories=advisories)

    _checkpoint(cancel_event)
    episodes = await catalog.fetch_episode_list(series_id, index.value)
    if not episodes:
        return MatchOutcome(index=index, advisories=advisories)

    upper_bound = max(episode.order for episode in episodes)
    bounded = resolve_index(
        index.value,
        extracted,
        always_replace=always_replace,
        upper_bound=upper_bound,
    )
    if bounded.source in (IndexSource.EXISTING, IndexSource.FROM_FILENAME):
        # Nothing changed; keep the first pass decision and its tag.
        final = index
    else:
        final = bounded
        advisory = advisory_for(bounded, index.value, file_name)
        if advisory is not None:
            advisories.append(advisory)

    return MatchOutcome(
        episode=find_by_order(episodes, final.value),
        index=final,
        advisories=advisories,
    )

"""Episode resolution pipeline for a single file.

Wires the normalizer, extractor, resolver and matcher together, logs the
advisories they return and maps a matched episode to output metadata fields.
"""

import asyncio

from bangumatch.core.extractor import extract_episode_number
from bangumatch.core.matcher import match_episode
from bangumatch.core.normalizer import normalize_name
from bangumatch.core.resolver import advisory_for, resolve_index
from bangumatch.metadata.base import EpisodeCatalog
from bangumatch.models.core import (
    CanonicalEpisode,
    EpisodeMetadata,
    FileDescriptor,
    IndexSource,
    MatchOutcome,
    SeasonInfo,
)
from bangumatch.utils import debug


def pick_series_id(series_id: str | None, season: SeasonInfo | None = None) -> str | None:
    """Return the season's catalog id when present, else the show's."""
    if season is not None and season.series_id:
        return season.series_id
    return series_id or None


async def resolve_episode(
    file: FileDescriptor,
    catalog: EpisodeCatalog,
    *,
    always_replace: bool = False,
    cancel_event: asyncio.Event | None = None,
) -> MatchOutcome:
    """Resolve which canonical episode *file* represents.

    Args:
        file: The file to resolve.
        catalog: Episode catalog collaborator.
        always_replace: Override policy; filename numbers beat existing ones.
        cancel_event: When set, resolution aborts at the next fetch.

    Returns:
        The match outcome. An empty outcome (no episode) is returned without
        any catalog call when the file name or series id is missing.
        When neither the existing index nor the file name yields a number only
        the known episode id is tried; the episode list is never searched.

    Raises:
        httpx.HTTPError: Catalog failures propagate unchanged.
        ResolutionCancelledError: If *cancel_event* is set at a checkpoint.
    """
    file_name = file.file_name
    if not file_name or not file.series_id:
        debug.debug(f"skipping {file.path!r}: no file name or series id")
        return MatchOutcome()

    extracted = extract_episode_number(normalize_name(file_name))
    first = resolve_index(file.existing_index, extracted, always_replace=always_replace)
    first_advisory = advisory_for(first, file.existing_index, file_name)

    known_episode_id = file.known_episode_id
    if first.source == IndexSource.OVERRIDDEN_FROM_FILENAME:
        # The stored id points at the episode the overridden index described.
        known_episode_id = None

    # No index from either source: nothing to search the list for.
    has_index = file.existing_index is not None or extracted is not None
    outcome = await match_episode(
        catalog,
        file.series_id,
        first,
        known_episode_id=known_episode_id,
        special=file.special_marker_present,
        extracted=extracted,
        file_name=file_name,
        always_replace=always_replace,
        search_list=has_index,
        cancel_event=cancel_event,
    )
    if first_advisory is not None:
        outcome.advisories.insert(0, first_advisory)

    for item in outcome.advisories:
        debug.advisory(item)
    if outcome.index is not None and outcome.index.source == IndexSource.EXISTING:
        debug.info(f"use existing episode number {outcome.index.value} for {file_name}")
    return outcome


def build_episode_metadata(
    episode: CanonicalEpisode,
    *,
    season: SeasonInfo | None = None,
    use_original_name: bool = False,
) -> EpisodeMetadata:
    """Map a matched canonical episode to the output metadata fields."""
    return EpisodeMetadata(
        provider_id=episode.id,
        name=episode.display_name(use_original_name),
        original_title=episode.name or None,
        index_number=int(episode.order),
        overview=episode.description,
        premiere_date=episode.air_date,
        production_year=episode.air_date.year if episode.air_date else None,
        season_id=season.id if season else None,
        parent_index_number=season.index_number if season else None,
    )

"""Core episode resolution for bangumatch.

- normalize_name: strips resolution, codec and season tokens from a file name.
- extract_episode_number: first-match-wins regex cascade over a normalized name.
- resolve_index: reconciles an existing index with the filename-derived one.
- match_episode: finds the canonical episode for a resolved index.
- resolve_episode: the whole pipeline for one file.
"""

from bangumatch.core.extractor import extract_episode_number
from bangumatch.core.matcher import ResolutionCancelledError, match_episode
from bangumatch.core.normalizer import normalize_name
from bangumatch.core.pipeline import (
    build_episode_metadata,
    pick_series_id,
    resolve_episode,
)
from bangumatch.core.resolver import guess_episode_index, resolve_index

__all__ = [
    "ResolutionCancelledError",
    "build_episode_metadata",
    "extract_episode_number",
    "guess_episode_index",
    "match_episode",
    "normalize_name",
    "pick_series_id",
    "resolve_episode",
    "resolve_index",
]

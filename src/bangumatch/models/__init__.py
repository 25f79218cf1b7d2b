"""Data models for bangumatch."""

from bangumatch.models.core import (
    Advisory,
    AdvisoryKind,
    CanonicalEpisode,
    EpisodeMetadata,
    FileDescriptor,
    IndexSource,
    MatchOutcome,
    ResolvedIndex,
    SeasonInfo,
)

__all__ = [
    "Advisory",
    "AdvisoryKind",
    "CanonicalEpisode",
    "EpisodeMetadata",
    "FileDescriptor",
    "IndexSource",
    "MatchOutcome",
    "ResolvedIndex",
    "SeasonInfo",
]

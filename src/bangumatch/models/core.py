"""Core domain models for bangumatch.

This module defines the transient data structures that flow through one
episode resolution: the file being resolved, the canonical episodes returned
by the catalog, the resolved index and the final match outcome.
- Every model is constructed fresh per resolution and discarded afterwards.
- Optional numeric fields are true optionals; ``None`` never means zero.

Design:
- IndexSource and AdvisoryKind enums give every resolver decision a typed tag
  so callers decide how to surface it.
- CanonicalEpisode keeps the catalog order as a Decimal because specials may
  carry fractional orders.
- EpisodeMetadata is the flat output consumed by media library integrations.
"""

import re
from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class IndexSource(str, Enum):
    """Where a resolved episode index came from.

    ``EXISTING`` and ``FROM_FILENAME`` are plain decisions. The remaining
    values are overrides or corrections the caller should surface as
    advisories.
    """

    EXISTING = "existing"
    FROM_FILENAME = "from_filename"
    OVERRIDDEN_FROM_FILENAME = "overridden_from_filename"
    CORRECTED_ABOVE_BOUND = "corrected_above_bound"
    CORRECTED_FROM_UNSET = "corrected_from_unset"


ADVISORY_SOURCES = frozenset(
    {
        IndexSource.OVERRIDDEN_FROM_FILENAME,
        IndexSource.CORRECTED_ABOVE_BOUND,
        IndexSource.CORRECTED_FROM_UNSET,
    }
)


class AdvisoryKind(str, Enum):
    """Kinds of recoverable disagreements reported during resolution."""

    INDEX_OVERRIDDEN = "index_overridden"
    INDEX_CORRECTED_ABOVE_BOUND = "index_corrected_above_bound"
    INDEX_CORRECTED_FROM_UNSET = "index_corrected_from_unset"
    PARENT_MISMATCH = "parent_mismatch"


class FileDescriptor(BaseModel):
    """A video file awaiting episode resolution."""

    path: str
    """Full path (or bare file name) of the video file."""

    existing_index: int | None = None
    """Index number attached by prior processing, if any."""

    known_episode_id: str | None = None
    """Catalog episode id already attached to the file, if any."""

    series_id: str | None = None
    """Catalog id of the series (or season) the file belongs to."""

    @property
    def file_name(self) -> str:
        """Last path segment, accepting both POSIX and Windows separators."""
        return re.split(r"[\\/]", self.path)[-1]

    @property
    def special_marker_present(self) -> bool:
        """Whether the path carries a Special/OVA/OAD marker."""
        from bangumatch.core.normalizer import has_special_marker

        return has_special_marker(self.path)


class CanonicalEpisode(BaseModel):
    """An authoritative episode record from the catalog."""

    id: str
    parent_series_id: str
    order: Decimal = Field(ge=0)
    air_date: date | None = None
    name: str = ""
    name_cn: str = ""
    description: str | None = None
    episode_type: int = 0

    @field_validator("air_date", mode="before")
    @classmethod
    def _blank_air_date(cls, value: object) -> object:
        # The catalog reports unknown air dates as an empty string.
        if value == "":
            return None
        return value

    def display_name(self, use_original_name: bool = False) -> str:
        """Return the localized title unless the original one is preferred."""
        if use_original_name or not self.name_cn:
            return self.name
        return self.name_cn


class ResolvedIndex(BaseModel):
    """Final episode index for a file together with its decision tag."""

    value: int = Field(ge=0)
    source: IndexSource

    @property
    def is_advisory(self) -> bool:
        """True when the index overrode or corrected the existing one."""
        return self.source in ADVISORY_SOURCES


class Advisory(BaseModel):
    """A recoverable disagreement the caller may want to report."""

    kind: AdvisoryKind
    message: str


class MatchOutcome(BaseModel):
    """Result of resolving one file against the catalog.

    ``episode`` is ``None`` when nothing matched; that is a normal result and
    never an error.
    """

    episode: CanonicalEpisode | None = None
    index: ResolvedIndex | None = None
    advisories: list[Advisory] = Field(default_factory=list)

    @property
    def matched(self) -> bool:
        return self.episode is not None


class SeasonInfo(BaseModel):
    """Parent season container of a file, as known by the caller."""

    id: str | None = None
    index_number: int | None = None
    series_id: str | None = None
    """Catalog id attached to the season itself, preferred over the show's."""


class EpisodeMetadata(BaseModel):
    """Metadata fields populated from a matched canonical episode."""

    provider_id: str
    name: str
    original_title: str | None = None
    index_number: int
    overview: str | None = None
    premiere_date: date | None = None
    production_year: int | None = None
    season_id: str | None = None
    parent_index_number: int | None = None

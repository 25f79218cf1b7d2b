"""Tests for bangumatch.models.core."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from bangumatch.models.core import (
    CanonicalEpisode,
    FileDescriptor,
    IndexSource,
    MatchOutcome,
    ResolvedIndex,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/media/tv/Show/Show - 01.mkv", "Show - 01.mkv"),
        ("C:\\media\\Show\\Show - 01.mkv", "Show - 01.mkv"),
        ("Show - 01.mkv", "Show - 01.mkv"),
        ("/media/tv/", ""),
    ],
)
def test_file_name(path: str, expected: str) -> None:
    assert FileDescriptor(path=path).file_name == expected


def test_special_marker_checks_whole_path() -> None:
    assert FileDescriptor(path="/tv/Show/Specials/Show OVA 01.mkv").special_marker_present
    assert FileDescriptor(path="/tv/Show/Special/Show 01.mkv").special_marker_present
    assert not FileDescriptor(path="/tv/Show/Show 01.mkv").special_marker_present


def test_canonical_episode_blank_air_date() -> None:
    episode = CanonicalEpisode(id="1", parent_series_id="2", order=1, air_date="")
    assert episode.air_date is None


def test_canonical_episode_parses_air_date_and_fractional_order() -> None:
    episode = CanonicalEpisode(
        id="1", parent_series_id="2", order="12.5", air_date="2020-01-04"
    )
    assert episode.air_date == date(2020, 1, 4)
    assert episode.order == Decimal("12.5")


def test_canonical_episode_rejects_negative_order() -> None:
    with pytest.raises(ValidationError):
        CanonicalEpisode(id="1", parent_series_id="2", order=-1)


def test_display_name_falls_back_to_original() -> None:
    episode = CanonicalEpisode(id="1", parent_series_id="2", order=1, name="Orig")
    assert episode.display_name() == "Orig"
    localized = episode.model_copy(update={"name_cn": "Loc"})
    assert localized.display_name() == "Loc"
    assert localized.display_name(use_original_name=True) == "Orig"


def test_resolved_index_rejects_negative_values() -> None:
    with pytest.raises(ValidationError):
        ResolvedIndex(value=-1, source=IndexSource.EXISTING)


def test_match_outcome_defaults() -> None:
    outcome = MatchOutcome()
    assert not outcome.matched
    assert outcome.advisories == []


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/anime/Show/Show Special 01.mkv", True),
        ("Show OAD 2.mkv", True),
        ("Show - 05.mkv", False),
        ("show ova.mkv", False),
    ],
)
def test_special_marker_is_case_sensitive(path: str, expected: bool) -> None:
    assert FileDescriptor(path=path).special_marker_present is expected

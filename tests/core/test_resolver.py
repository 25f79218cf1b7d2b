"""Tests for bangumatch.core.resolver.

Covers every decision rule, their priority order and the advisory messages.
"""

from decimal import Decimal

import pytest

from bangumatch.core.resolver import advisory_for, guess_episode_index, resolve_index
from bangumatch.models.core import AdvisoryKind, IndexSource, ResolvedIndex


def test_override_policy_prefers_filename() -> None:
    result = resolve_index(3, 7, always_replace=True)
    assert result == ResolvedIndex(value=7, source=IndexSource.OVERRIDDEN_FROM_FILENAME)
    assert result.is_advisory


def test_override_policy_without_disagreement_keeps_existing() -> None:
    result = resolve_index(7, 7, always_replace=True)
    assert result == ResolvedIndex(value=7, source=IndexSource.EXISTING)


def test_override_policy_without_filename_number_keeps_existing() -> None:
    result = resolve_index(3, None, always_replace=True)
    assert result.value == 3
    assert result.source == IndexSource.EXISTING


def test_bound_correction() -> None:
    result = resolve_index(50, 12, upper_bound=24)
    assert result == ResolvedIndex(value=12, source=IndexSource.CORRECTED_ABOVE_BOUND)


def test_bound_is_inclusive() -> None:
    assert resolve_index(24, 12, upper_bound=24).source == IndexSource.EXISTING


def test_bound_accepts_decimal_orders() -> None:
    result = resolve_index(13, 2, upper_bound=Decimal("12.5"))
    assert result.source == IndexSource.CORRECTED_ABOVE_BOUND
    assert result.value == 2


def test_override_takes_priority_over_bound() -> None:
    result = resolve_index(50, 12, always_replace=True, upper_bound=24)
    assert result.source == IndexSource.OVERRIDDEN_FROM_FILENAME


def test_unset_correction() -> None:
    result = resolve_index(None, 9)
    assert result == ResolvedIndex(value=9, source=IndexSource.CORRECTED_FROM_UNSET)


def test_zero_existing_is_corrected_from_filename() -> None:
    assert resolve_index(0, 9).source == IndexSource.CORRECTED_FROM_UNSET


def test_negative_existing_is_treated_as_unset() -> None:
    result = resolve_index(-1, 4)
    assert result == ResolvedIndex(value=4, source=IndexSource.CORRECTED_FROM_UNSET)


def test_no_signal_keeps_existing() -> None:
    result = resolve_index(4, None)
    assert result == ResolvedIndex(value=4, source=IndexSource.EXISTING)
    assert not result.is_advisory


def test_existing_beats_filename_without_policy() -> None:
    assert resolve_index(4, 8) == ResolvedIndex(value=4, source=IndexSource.EXISTING)


def test_nothing_known_defaults_to_zero() -> None:
    assert resolve_index(None, None) == ResolvedIndex(value=0, source=IndexSource.EXISTING)


def test_explicit_zero_from_filename() -> None:
    assert resolve_index(None, 0) == ResolvedIndex(value=0, source=IndexSource.FROM_FILENAME)


def test_guess_runs_normalizer_and_extractor() -> None:
    result = guess_episode_index(None, "[Group] Show - 05 [1080p][x264].mkv")
    assert result == ResolvedIndex(value=5, source=IndexSource.CORRECTED_FROM_UNSET)


def test_guess_with_bound() -> None:
    result = guess_episode_index(50, "Show [12].mkv", upper_bound=24)
    assert result.value == 12
    assert result.source == IndexSource.CORRECTED_ABOVE_BOUND


@pytest.mark.parametrize(
    ("source", "kind", "fragment"),
    [
        (IndexSource.OVERRIDDEN_FROM_FILENAME, AdvisoryKind.INDEX_OVERRIDDEN, "instead of 3"),
        (
            IndexSource.CORRECTED_ABOVE_BOUND,
            AdvisoryKind.INDEX_CORRECTED_ABOVE_BOUND,
            "has incorrect episode index 3",
        ),
        (
            IndexSource.CORRECTED_FROM_UNSET,
            AdvisoryKind.INDEX_CORRECTED_FROM_UNSET,
            "should be 7",
        ),
    ],
)
def test_advisory_for_corrections(
    source: IndexSource, kind: AdvisoryKind, fragment: str
) -> None:
    advisory = advisory_for(ResolvedIndex(value=7, source=source), 3, "Show 07.mkv")
    assert advisory is not None
    assert advisory.kind == kind
    assert fragment in advisory.message
    assert "Show 07.mkv" in advisory.message


@pytest.mark.parametrize("source", [IndexSource.EXISTING, IndexSource.FROM_FILENAME])
def test_advisory_for_kept_is_none(source: IndexSource) -> None:
    assert advisory_for(ResolvedIndex(value=1, source=source), 1, "a.mkv") is None

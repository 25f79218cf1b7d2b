"""Conflict resolver: reconciles an existing index with a filename-derived one.

The resolver never logs and never raises. Every decision is returned as a
:class:`~bangumatch.models.core.ResolvedIndex` whose ``source`` tag tells the
caller whether the existing index was kept, overridden or corrected.
"""

from decimal import Decimal

from bangumatch.core.extractor import extract_episode_number
from bangumatch.core.normalizer import normalize_name
from bangumatch.models.core import Advisory, AdvisoryKind, IndexSource, ResolvedIndex


def resolve_index(
    existing: int | None,
    extracted: int | None,
    *,
    always_replace: bool = False,
    upper_bound: Decimal | float | int | None = None,
) -> ResolvedIndex:
    """Decide the final episode index for a file.

    Rules are evaluated in priority order:

    1. ``always_replace`` and the filename value differs from the existing one:
       the filename wins (``OVERRIDDEN_FROM_FILENAME``).
    2. ``upper_bound`` is known and the existing value exceeds it: the filename
       value replaces it (``CORRECTED_ABOVE_BOUND``).
    3. The filename value is positive and the existing one is unset or zero:
       the filename value is used (``CORRECTED_FROM_UNSET``).
    4. Otherwise the existing value is kept.

    Args:
        existing: Index attached by prior processing, or None when unset.
        extracted: Number extracted from the file name, or None for no match.
        always_replace: Override policy; the filename always wins when set.
        upper_bound: Inclusive ceiling for valid indices, when known.

    Returns:
        The resolved index and its decision tag.
    """
    current = max(existing or 0, 0)
    from_name = extracted if extracted is not None else current

    if always_replace and from_name != current:
        return ResolvedIndex(value=from_name, source=IndexSource.OVERRIDDEN_FROM_FILENAME)

    if upper_bound is not None and current > upper_bound:
        return ResolvedIndex(value=from_name, source=IndexSource.CORRECTED_ABOVE_BOUND)

    if from_name > 0 and current <= 0:
        return ResolvedIndex(value=from_name, source=IndexSource.CORRECTED_FROM_UNSET)

    if existing is None and extracted is not None:
        return ResolvedIndex(value=current, source=IndexSource.FROM_FILENAME)
    return ResolvedIndex(value=current, source=IndexSource.EXISTING)


def guess_episode_index(
    existing: int | None,
    file_name: str,
    *,
    always_replace: bool = False,
    upper_bound: Decimal | float | int | None = None,
) -> ResolvedIndex:
    """Normalize *file_name*, extract its number and resolve it against *existing*."""
    extracted = extract_episode_number(normalize_name(file_name))
    return resolve_index(
        existing, extracted, always_replace=always_replace, upper_bound=upper_bound
    )


def advisory_for(
    index: ResolvedIndex, previous: int | None, file_name: str
) -> Advisory | None:
    """Describe a non-kept resolver decision, or return None for kept ones.

    Args:
        index: The resolver decision.
        previous: The index the decision was made against.
        file_name: File name, for the message.
    """
    if index.source == IndexSource.OVERRIDDEN_FROM_FILENAME:
        return Advisory(
            kind=AdvisoryKind.INDEX_OVERRIDDEN,
            message=(
                f"use episode index {index.value} instead of {previous} "
                f"for {file_name}"
            ),
        )
    if index.source == IndexSource.CORRECTED_ABOVE_BOUND:
        return Advisory(
            kind=AdvisoryKind.INDEX_CORRECTED_ABOVE_BOUND,
            message=(
                f"file {file_name} has incorrect episode index {previous}, "
                f"set to {index.value}"
            ),
        )
    if index.source == IndexSource.CORRECTED_FROM_UNSET:
        return Advisory(
            kind=AdvisoryKind.INDEX_CORRECTED_FROM_UNSET,
            message=(
                f"file {file_name} may have incorrect episode index {previous}, "
                f"should be {index.value}"
            ),
        )
    return None

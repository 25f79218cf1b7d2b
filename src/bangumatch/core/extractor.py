"""Number extractor: ordered regex cascade over a normalized file name."""

import re

# Most to least specific. Only runs of two or more digits are considered, so
# single-digit episode numbers are never extracted.
EPISODE_NUMBER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\[(\d{2,})\]"),  # [12]
    re.compile(r"- ?(\d{2,})"),  # - 12, -12
    re.compile(r"[Ee]P?(\d{2,})"),  # E12, e12, EP12
    re.compile(r"\[(\d{2,})"),  # [12v2
    re.compile(r"(\d{2,})"),
)


def extract_episode_number(normalized_name: str) -> int | None:
    """Return the number captured by the first matching pattern.

    Patterns after the first match are not attempted.

    Args:
        normalized_name: Output of :func:`bangumatch.core.normalizer.normalize_name`.

    Returns:
        The extracted episode number, or None if no pattern fires.
    """
    for pattern in EPISODE_NUMBER_PATTERNS:
        match = pattern.search(normalized_name)
        if match:
            return int(match.group(1))
    return None

"""Name normalizer: strips tokens that never encode an episode number.

Release names routinely carry season markers, resolutions, bit depths and
codec tags whose digits would otherwise be mistaken for an episode number.
They are removed before the extraction cascade runs.
"""

import re

# Applied in this order; each pattern sees the result of the previous removals.
NON_EPISODE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"S\d{2,}"),  # season marker: S01, S12
    re.compile(r"\d{3,4}p"),  # resolution: 720p, 1080p
    re.compile(r"(?:Hi)?10p"),  # 10-bit profile: Hi10p
    re.compile(r"(?:8|10)bit"),
    re.compile(r"[xh]26[45]"),  # codec: x264, h265
)


def _strip_once(name: str) -> str:
    for pattern in NON_EPISODE_PATTERNS:
        name = pattern.sub("", name)
    return name


def normalize_name(name: str) -> str:
    """Remove every non-episode token from *name*.

    The ordered pass is repeated until the string stops changing, so a
    removal that exposes a new match for an earlier pattern is still caught
    and normalizing an already normalized name is a no-op.

    Args:
        name: File name, with or without extension.

    Returns:
        The name with all non-episode tokens removed.
    """
    while True:
        stripped = _strip_once(name)
        if stripped == name:
            return stripped
        name = stripped



# Files carrying one of these markers skip parent-series validation.
SPECIAL_MARKER_PATTERN = re.compile(r"Special|OVA|OAD")


def has_special_marker(text: str) -> bool:
    """Whether *text* contains a Special, OVA or OAD marker (case-sensitive)."""
    return SPECIAL_MARKER_PATTERN.search(text) is not None

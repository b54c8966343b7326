"""Enumerations for jpcontext."""

import enum


class FrequencyCategory(enum.IntEnum):
    """How often an ordered hiragana pair occurs in real Japanese text.

    Values match the cells of :data:`jpcontext.models.JP2_CHAR_CONTEXT`.
    Only ``NEVER`` counts against an encoding when computing confidence.
    """

    NEVER = 0
    RARE = 1
    UNCOMMON = 2
    COMMON = 3
    FREQUENT = 4
    VERY_FREQUENT = 5

"""Hiragana context analysis for Shift_JIS and EUC-JP byte streams."""

from __future__ import annotations

from jpcontext._utils import (
    DEFAULT_MAX_BYTES,
    MINIMUM_DATA_THRESHOLD,
    _validate_max_bytes,
)
from jpcontext.analysis import DONT_KNOW, ContextResult
from jpcontext.analysis.context import (
    EUCJPContextAnalysis,
    JapaneseContextAnalysis,
    SJISContextAnalysis,
)
from jpcontext.detector import JapaneseContextDetector
from jpcontext.registry import create_analysis

__version__ = "1.0.0"
__all__ = [
    "DONT_KNOW",
    "ContextResult",
    "EUCJPContextAnalysis",
    "JapaneseContextAnalysis",
    "JapaneseContextDetector",
    "SJISContextAnalysis",
    "analyze",
    "analyze_all",
]


def analyze(
    byte_str: bytes | bytearray,
    encoding: str = "shift_jis",
    min_relations: int = MINIMUM_DATA_THRESHOLD,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> dict[str, str | float | int | None]:
    """Score *byte_str* as hiragana-bearing text in *encoding*.

    :param byte_str: The bytes to examine.  Only the first *max_bytes* are
        used.
    :param encoding: Any alias of Shift_JIS or EUC-JP.
    :param min_relations: Hiragana pairs that must be exceeded before a
        confidence is reported.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: A dict with ``'encoding'``, ``'confidence'`` and ``'relations'``
        keys; ``'confidence'`` is ``None`` when there was too little data.
    :raises ValueError: For an unsupported encoding or invalid thresholds.
    """
    _validate_max_bytes(max_bytes)
    analysis = create_analysis(encoding, min_relations=min_relations)
    analysis.feed(byte_str[:max_bytes])
    return ContextResult.from_analysis(analysis).to_dict()


def analyze_all(
    byte_str: bytes | bytearray,
    min_relations: int = MINIMUM_DATA_THRESHOLD,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> list[dict[str, str | float | int | None]]:
    """Score *byte_str* against every supported encoding.

    Results with a numeric confidence come first, highest first; results
    with insufficient data come last.  No encoding is selected.
    """
    detector = JapaneseContextDetector(
        min_relations=min_relations, max_bytes=max_bytes
    )
    detector.feed(byte_str)
    return [r.to_dict() for r in detector.close()]

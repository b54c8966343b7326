"""Hiragana context analysis and shared result types."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jpcontext.analysis.context import JapaneseContextAnalysis

#: Returned by :meth:`JapaneseContextAnalysis.get_confidence` while too few
#: relations have been seen.  Deliberately outside ``[0, 1]``.
DONT_KNOW: float = -1.0


@dataclasses.dataclass(frozen=True, slots=True)
class ContextResult:
    """Snapshot of one analyzer's verdict.

    ``confidence`` is ``None`` when the analyzer has not seen enough
    hiragana pairs to say anything; it is never a stand-in number.
    """

    encoding: str
    confidence: float | None
    relations: int

    @classmethod
    def from_analysis(cls, analysis: JapaneseContextAnalysis) -> ContextResult:
        """Build a result from the current state of *analysis*."""
        confidence = analysis.get_confidence()
        return cls(
            encoding=analysis.charset_name,
            confidence=None if confidence == DONT_KNOW else confidence,
            relations=analysis.total_relations,
        )

    def to_dict(self) -> dict[str, str | float | int | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'``, ``'confidence'``, and
            ``'relations'`` keys.
        """
        return {
            "encoding": self.encoding,
            "confidence": self.confidence,
            "relations": self.relations,
        }

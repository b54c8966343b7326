"""JapaneseContextDetector: streaming hiragana context report."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jpcontext._utils import (
    DEFAULT_MAX_BYTES,
    MINIMUM_DATA_THRESHOLD,
    _validate_max_bytes,
)
from jpcontext.analysis import ContextResult
from jpcontext.analysis.context import JapaneseContextAnalysis
from jpcontext.registry import ANALYSES, create_analysis

logger = logging.getLogger(__name__)


def _sort_key(result: ContextResult) -> tuple[bool, float]:
    # Numeric confidences first, highest first; "insufficient data" last.
    if result.confidence is None:
        return True, 0.0
    return False, -result.confidence


class JapaneseContextDetector:
    """Run one hiragana context analysis per candidate encoding.

    Every analysis sees the same chunks in the same order.  The detector
    reports each encoding's confidence; choosing between them is left to
    the caller.
    """

    def __init__(
        self,
        encodings: Iterable[str] | str | None = None,
        min_relations: int = MINIMUM_DATA_THRESHOLD,
        max_bytes: int = DEFAULT_MAX_BYTES,
    ) -> None:
        """Initialize the detector.

        :param encodings: Encoding names to analyse, or a single name.  Aliases
            of the same encoding are merged.  Defaults to every supported encoding.
        :param min_relations: Hiragana pairs each analysis must exceed before
            it reports a confidence.
        :param max_bytes: Maximum number of bytes accepted from :meth:`feed`
            calls before the detector stops consuming input.
        :raises ValueError: If an encoding is unsupported, no encoding is
            given, or a threshold is invalid.
        """
        _validate_max_bytes(max_bytes)
        if encodings is None:
            encodings = ANALYSES
        elif isinstance(encodings, str):
            encodings = [encodings]
        self._analyses: dict[str, JapaneseContextAnalysis] = {}
        for name in encodings:
            analysis = create_analysis(name, min_relations=min_relations)
            self._analyses.setdefault(analysis.charset_name, analysis)
        if not self._analyses:
            msg = "at least one encoding is required"
            raise ValueError(msg)
        self._max_bytes = max_bytes
        self._bytes_seen = 0
        self._done = False
        self._closed = False
        self._results: list[ContextResult] | None = None

    def feed(self, byte_str: bytes | bytearray | memoryview) -> None:
        """Feed the next chunk of the stream to every analysis.

        :param byte_str: The next chunk of bytes, in stream order.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        if self._done:
            return
        remaining = self._max_bytes - self._bytes_seen
        chunk = byte_str[:remaining]
        self._bytes_seen += len(chunk)
        for analysis in self._analyses.values():
            analysis.feed(chunk)

        if self._bytes_seen >= self._max_bytes:
            logger.debug("byte budget of %s reached", self._max_bytes)
            self._done = True
        elif all(a.done or a.got_enough_data() for a in self._analyses.values()):
            logger.debug("every analysis has enough hiragana relations")
            self._done = True

    def close(self) -> list[ContextResult]:
        """Finalize and return one result per encoding.

        :returns: Results with a numeric confidence first, highest first,
            followed by results with insufficient data.
        """
        if not self._closed:
            self._closed = True
            self._done = True
            self._results = self._snapshot()
        return self.results

    def reset(self) -> None:
        """Reset the detector and every analysis for a new stream."""
        for analysis in self._analyses.values():
            analysis.reset()
        self._bytes_seen = 0
        self._done = False
        self._closed = False
        self._results = None

    def _snapshot(self) -> list[ContextResult]:
        results = [ContextResult.from_analysis(a) for a in self._analyses.values()]
        return sorted(results, key=_sort_key)

    @property
    def done(self) -> bool:
        """Whether no more data is needed (or accepted)."""
        return self._done

    @property
    def results(self) -> list[ContextResult]:
        """The current per-encoding results."""
        if self._results is not None:
            return list(self._results)
        return self._snapshot()

"""Streaming hiragana context analysis.

A :class:`JapaneseContextAnalysis` is fed successive chunks of one byte
stream.  It decodes character boundaries with an encoding-specific
``get_order`` and, for every pair of adjacent hiragana, records the frequency
category of that pair from :data:`jpcontext.models.JP2_CHAR_CONTEXT`.  Text in
the right encoding produces mostly common pairs; bytes decoded with the wrong
encoding produce rare pairs, or no hiragana at all.

A character split across two chunks is dropped rather than reassembled: the
tail bytes are skipped at the start of the next chunk.
"""

from __future__ import annotations

import logging

from jpcontext._utils import (
    MINIMUM_DATA_THRESHOLD,
    _validate_max_relations,
    _validate_min_relations,
)
from jpcontext.analysis import DONT_KNOW
from jpcontext.analysis.order import get_resolver, is_cp932_lead
from jpcontext.enums import FrequencyCategory
from jpcontext.models import _FLAT_CONTEXT, NUM_OF_CATEGORY, NUM_OF_HIRAGANA

#: Relations after which :meth:`got_enough_data` reports True.
ENOUGH_REL_THRESHOLD: int = 100

#: Relations after which the analysis stops consuming input.
MAX_REL_THRESHOLD: int = 1000


class JapaneseContextAnalysis:
    """Accumulate hiragana pair statistics over a chunked byte stream.

    Subclasses supply :meth:`get_order` for one encoding.  The base class
    treats every byte as a one-byte, non-hiragana character.
    """

    def __init__(
        self,
        *,
        min_relations: int = MINIMUM_DATA_THRESHOLD,
        max_relations: int = MAX_REL_THRESHOLD,
    ) -> None:
        """Initialize the analysis.

        :param min_relations: Confidence is only reported once more than
            this many hiragana pairs have been seen.
        :param max_relations: Stop consuming input once more than this many
            hiragana pairs have been seen.
        :raises ValueError: If either threshold is invalid.
        """
        _validate_min_relations(min_relations)
        _validate_max_relations(max_relations)
        self._data_threshold = min_relations
        self._max_relations = max_relations
        self._charset_name = ""
        self.logger = logging.getLogger(__name__)
        self._total_rel = 0
        self._rel_sample = [0] * NUM_OF_CATEGORY
        self._need_to_skip_char_num = 0
        self._last_char_order = -1
        self._done = False
        self.reset()

    def reset(self) -> None:
        """Reset the analysis to its initial state for a new stream."""
        self._total_rel = 0  # total sequences received
        # category counters; each integer counts sequences in its category
        self._rel_sample = [0] * NUM_OF_CATEGORY
        # bytes of a truncated character still to skip in the next chunk
        self._need_to_skip_char_num = 0
        self._last_char_order = -1  # hiragana order of the last character
        # True once enough relations were seen that more data cannot matter
        self._done = False

    def feed(self, byte_str: bytes | bytearray | memoryview) -> None:
        """Consume the next chunk of the stream.

        :param byte_str: The next chunk of bytes, in stream order.
        """
        if self._done:
            return

        num_bytes = len(byte_str)
        i = self._need_to_skip_char_num
        if i >= num_bytes:
            # The whole chunk belongs to the character truncated last time.
            self._need_to_skip_char_num = i - num_bytes
            return
        self._need_to_skip_char_num = 0

        get_order = self.get_order
        rel_sample = self._rel_sample
        max_relations = self._max_relations
        total_rel = self._total_rel
        last_order = self._last_char_order

        while i < num_bytes:
            char_len, order = get_order(byte_str, i)
            if i + char_len > num_bytes:
                self._need_to_skip_char_num = i + char_len - num_bytes
                last_order = -1
                self.logger.debug(
                    "%s context analysis: character at offset %s truncated, "
                    "skipping %s byte(s) of next chunk",
                    self.charset_name,
                    i,
                    self._need_to_skip_char_num,
                )
                break
            if order != -1 and last_order != -1:
                total_rel += 1
                if total_rel > max_relations:
                    self._done = True
                    self.logger.debug(
                        "%s context analysis done after %s relations",
                        self.charset_name,
                        total_rel,
                    )
                    break
                rel_sample[_FLAT_CONTEXT[last_order * NUM_OF_HIRAGANA + order]] += 1
            last_order = order
            i += char_len

        self._total_rel = total_rel
        self._last_char_order = last_order

    def get_confidence(self) -> float:
        """Return the share of observed pairs that are not category 0.

        This is a density heuristic, not a calibrated probability.

        :returns: A float in ``[0.0, 1.0]``, or :data:`DONT_KNOW` when no more
            than ``min_relations`` pairs have been seen.
        """
        if self._total_rel > self._data_threshold:
            never = self._rel_sample[FrequencyCategory.NEVER]
            return (self._total_rel - never) / self._total_rel
        return DONT_KNOW

    def got_enough_data(self) -> bool:
        """Whether enough pairs were seen for the confidence to have settled."""
        return self._total_rel > ENOUGH_REL_THRESHOLD

    def get_order(
        self, byte_str: bytes | bytearray | memoryview, pos: int
    ) -> tuple[int, int]:
        """Return ``(char_len, order)`` for the character at *pos*."""
        return 1, -1

    @property
    def charset_name(self) -> str:
        return self._charset_name

    @property
    def done(self) -> bool:
        """Whether the relation cutoff was reached; further input is ignored."""
        return self._done

    @property
    def total_relations(self) -> int:
        return self._total_rel

    @property
    def category_histogram(self) -> tuple[int, ...]:
        """Per-category relation counts, indexed by frequency category."""
        return tuple(self._rel_sample)

    @property
    def pending_skip(self) -> int:
        return self._need_to_skip_char_num

    @property
    def min_relations(self) -> int:
        return self._data_threshold

    @property
    def max_relations(self) -> int:
        return self._max_relations


class SJISContextAnalysis(JapaneseContextAnalysis):
    """Context analysis for Shift_JIS, noticing CP932-only characters."""

    _resolve = staticmethod(get_resolver("shift_jis"))

    def reset(self) -> None:
        super().reset()
        self._charset_name = "shift_jis"

    def get_order(
        self, byte_str: bytes | bytearray | memoryview, pos: int
    ) -> tuple[int, int]:
        char_len, order = self._resolve(byte_str, pos)
        if (
            char_len == 2
            and pos + 1 < len(byte_str)
            and is_cp932_lead(byte_str[pos])
        ):
            self._charset_name = "cp932"
        return char_len, order


class EUCJPContextAnalysis(JapaneseContextAnalysis):
    """Context analysis for EUC-JP."""

    _resolve = staticmethod(get_resolver("euc-jp"))

    def reset(self) -> None:
        super().reset()
        self._charset_name = "euc-jp"

    def get_order(
        self, byte_str: bytes | bytearray | memoryview, pos: int
    ) -> tuple[int, int]:
        return self._resolve(byte_str, pos)

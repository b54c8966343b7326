# tests/test_detector.py
from __future__ import annotations

import pytest
from conftest import HIRAGANA_RELATIONS, HIRAGANA_TEXT, MIXED_TEXT, encode_chunks

from jpcontext.analysis import ContextResult
from jpcontext.detector import JapaneseContextDetector


def test_basic_lifecycle():
    detector = JapaneseContextDetector()
    detector.feed(HIRAGANA_TEXT.encode("shift_jis"))
    results = detector.close()
    assert [r.encoding for r in results] == ["shift_jis", "euc-jp"]
    assert results[0] == ContextResult(
        encoding="shift_jis", confidence=1.0, relations=HIRAGANA_RELATIONS
    )
    assert results[1].confidence is None


def test_euc_jp_input_ranks_euc_jp_first():
    detector = JapaneseContextDetector()
    detector.feed(HIRAGANA_TEXT.encode("euc-jp"))
    results = detector.close()
    assert results[0].encoding == "euc-jp"
    assert results[0].confidence == 1.0
    assert results[1].confidence is None


def test_results_before_close():
    detector = JapaneseContextDetector()
    detector.feed(HIRAGANA_TEXT.encode("shift_jis"))
    assert detector.results[0].relations == HIRAGANA_RELATIONS
    assert detector.done is False


def test_results_sorted_by_confidence():
    detector = JapaneseContextDetector(min_relations=0)
    # ぁぁ... is rare in Shift_JIS; the EUC-JP reading of the same bytes
    # holds no hiragana at all.
    detector.feed("ぁ".encode("shift_jis") * 3 + "あ".encode("shift_jis") * 10)
    results = detector.close()
    numeric = [r.confidence for r in results if r.confidence is not None]
    assert numeric == sorted(numeric, reverse=True)
    assert results[-1].confidence is None


def test_chunked_feed_matches_single_feed():
    whole = JapaneseContextDetector()
    whole.feed(MIXED_TEXT.encode("euc-jp"))

    chunked = JapaneseContextDetector()
    for chunk in encode_chunks(MIXED_TEXT, "euc-jp", 4):
        chunked.feed(chunk)

    assert chunked.close() == whole.close()


def test_reset():
    detector = JapaneseContextDetector()
    detector.feed(HIRAGANA_TEXT.encode("shift_jis"))
    detector.close()
    detector.reset()
    assert detector.done is False
    assert all(r.relations == 0 for r in detector.results)
    detector.feed(HIRAGANA_TEXT.encode("shift_jis"))
    assert detector.close()[0].relations == HIRAGANA_RELATIONS


def test_feed_after_close_raises():
    detector = JapaneseContextDetector()
    detector.feed(b"Hello")
    detector.close()
    with pytest.raises(ValueError, match="after close"):
        detector.feed(b"more data")


def test_close_is_idempotent():
    detector = JapaneseContextDetector()
    detector.feed(HIRAGANA_TEXT.encode("shift_jis"))
    assert detector.close() == detector.close()


def test_done_when_max_bytes_reached():
    detector = JapaneseContextDetector(max_bytes=10)
    detector.feed("あ".encode("shift_jis") * 4)
    assert detector.done is False
    detector.feed("あ".encode("shift_jis") * 4)
    assert detector.done is True
    # Only the first 10 bytes (5 characters) were examined.
    assert detector.results[0].relations == 4


def test_feed_after_done_is_ignored():
    detector = JapaneseContextDetector(max_bytes=4)
    detector.feed("ああ".encode("shift_jis"))
    assert detector.done is True
    detector.feed("あああ".encode("shift_jis"))
    assert detector.results[0].relations == 1


def test_done_once_every_analysis_has_enough_data():
    sjis = "あ".encode("shift_jis") * 150
    detector = JapaneseContextDetector(encodings=["shift_jis"])
    detector.feed(sjis)
    assert detector.done is True


def test_done_waits_for_every_analysis():
    detector = JapaneseContextDetector()
    detector.feed("あ".encode("shift_jis") * 150)
    # The EUC-JP analysis has seen nothing useful yet.
    assert detector.done is False


def test_aliases_are_merged():
    detector = JapaneseContextDetector(encodings=["sjis", "cp932", "Shift_JIS"])
    detector.feed(HIRAGANA_TEXT.encode("shift_jis"))
    assert len(detector.close()) == 1


def test_single_encoding_name():
    detector = JapaneseContextDetector(encodings="sjis")
    detector.feed(HIRAGANA_TEXT.encode("shift_jis"))
    results = detector.close()
    assert [r.encoding for r in results] == ["shift_jis"]
    assert results[0].relations == HIRAGANA_RELATIONS


def test_unsupported_single_name_is_reported_whole():
    with pytest.raises(ValueError, match="utf-8"):
        JapaneseContextDetector(encodings="utf-8")


def test_unsupported_encoding_raises():
    with pytest.raises(ValueError):
        JapaneseContextDetector(encodings=["utf-8"])


def test_no_encodings_raises():
    with pytest.raises(ValueError, match="at least one"):
        JapaneseContextDetector(encodings=[])


@pytest.mark.parametrize("max_bytes", [0, -1, 1.5, True])
def test_invalid_max_bytes(max_bytes: object):
    with pytest.raises(ValueError, match="max_bytes"):
        JapaneseContextDetector(max_bytes=max_bytes)  # type: ignore[arg-type]


def test_invalid_min_relations():
    with pytest.raises(ValueError, match="min_relations"):
        JapaneseContextDetector(min_relations=-3)


def test_cp932_reported_by_name():
    detector = JapaneseContextDetector(encodings=["shift_jis"])
    detector.feed("①".encode("cp932") + HIRAGANA_TEXT.encode("shift_jis"))
    assert detector.close()[0].encoding == "cp932"

# tests/test_api.py
from __future__ import annotations

import pytest
from conftest import HIRAGANA_HISTOGRAM, HIRAGANA_RELATIONS, HIRAGANA_TEXT

import jpcontext


def test_analyze_returns_dict():
    result = jpcontext.analyze(HIRAGANA_TEXT.encode("shift_jis"))
    assert result == {
        "encoding": "shift_jis",
        "confidence": 1.0,
        "relations": HIRAGANA_RELATIONS,
    }


def test_analyze_euc_jp():
    result = jpcontext.analyze(HIRAGANA_TEXT.encode("euc-jp"), encoding="euc-jp")
    assert result["confidence"] == 1.0


def test_analyze_wrong_encoding_is_insufficient():
    result = jpcontext.analyze(HIRAGANA_TEXT.encode("euc-jp"), encoding="sjis")
    assert result["confidence"] is None
    assert result["relations"] == 0


def test_analyze_empty():
    result = jpcontext.analyze(b"")
    assert result["confidence"] is None


def test_analyze_bytearray():
    result = jpcontext.analyze(bytearray(HIRAGANA_TEXT.encode("shift_jis")))
    assert result["relations"] == HIRAGANA_RELATIONS


def test_analyze_respects_max_bytes():
    data = "あ".encode("shift_jis") * 100
    result = jpcontext.analyze(data, max_bytes=12, min_relations=0)
    assert result["relations"] == 5


def test_analyze_min_relations():
    data = "ああああ".encode("shift_jis")
    assert jpcontext.analyze(data)["confidence"] is None
    assert jpcontext.analyze(data, min_relations=2)["confidence"] == 1.0


def test_analyze_unsupported_encoding():
    with pytest.raises(ValueError):
        jpcontext.analyze(b"abc", encoding="latin-1")


@pytest.mark.parametrize("max_bytes", [0, -5, 2.0, False])
def test_analyze_invalid_max_bytes(max_bytes: object):
    with pytest.raises(ValueError, match="max_bytes"):
        jpcontext.analyze(b"abc", max_bytes=max_bytes)  # type: ignore[arg-type]


def test_analyze_all_returns_one_dict_per_encoding():
    results = jpcontext.analyze_all(HIRAGANA_TEXT.encode("shift_jis"))
    assert [r["encoding"] for r in results] == ["shift_jis", "euc-jp"]
    assert results[0]["confidence"] == 1.0
    assert results[1]["confidence"] is None


def test_analyze_all_puts_insufficient_data_last():
    results = jpcontext.analyze_all(HIRAGANA_TEXT.encode("euc-jp"))
    assert results[0]["encoding"] == "euc-jp"
    assert results[-1]["confidence"] is None


def test_analyze_all_empty():
    results = jpcontext.analyze_all(b"")
    assert all(r["confidence"] is None for r in results)


def test_analysis_classes_exported():
    analysis = jpcontext.SJISContextAnalysis()
    analysis.feed(HIRAGANA_TEXT.encode("shift_jis"))
    assert analysis.category_histogram == HIRAGANA_HISTOGRAM


def test_version_exists():
    assert isinstance(jpcontext.__version__, str)


def test_all_names_exist():
    for name in jpcontext.__all__:
        assert hasattr(jpcontext, name)

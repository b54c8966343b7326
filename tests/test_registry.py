# tests/test_registry.py
from __future__ import annotations

import pytest

from jpcontext.analysis.context import EUCJPContextAnalysis, SJISContextAnalysis
from jpcontext.registry import ANALYSES, create_analysis, normalize_encoding_name


def test_registry_has_both_encodings():
    assert list(ANALYSES) == ["shift_jis", "euc-jp"]


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("shift_jis", "shift_jis"),
        ("Shift-JIS", "shift_jis"),
        ("SJIS", "shift_jis"),
        ("cp932", "shift_jis"),
        ("ms932", "shift_jis"),
        ("shift_jis_2004", "shift_jis"),
        ("euc-jp", "euc-jp"),
        ("EUC_JP", "euc-jp"),
        ("eucjp", "euc-jp"),
        ("ujis", "euc-jp"),
        ("euc_jis_2004", "euc-jp"),
    ],
)
def test_normalize_encoding_name(alias: str, canonical: str):
    assert normalize_encoding_name(alias) == canonical


@pytest.mark.parametrize("name", ["utf-8", "iso-2022-jp", "big5", "no-such-codec"])
def test_normalize_unsupported(name: str):
    assert normalize_encoding_name(name) is None


def test_create_analysis_types():
    assert isinstance(create_analysis("sjis"), SJISContextAnalysis)
    assert isinstance(create_analysis("ujis"), EUCJPContextAnalysis)


def test_create_analysis_returns_fresh_instances():
    assert create_analysis("shift_jis") is not create_analysis("shift_jis")


def test_create_analysis_forwards_thresholds():
    analysis = create_analysis("euc-jp", min_relations=1, max_relations=20)
    assert analysis.min_relations == 1
    assert analysis.max_relations == 20


def test_create_analysis_unsupported():
    with pytest.raises(ValueError, match="unsupported encoding"):
        create_analysis("utf-8")

"""Shared test fixtures."""

from __future__ import annotations

import pytest

# Three hiragana runs separated by "。"; 54 adjacent hiragana pairs in total,
# none of them in frequency category 0.
HIRAGANA_TEXT = (
    "わたしはきのうともだちといっしょにこうえんへいきました。"
    "そこでおおきないぬをみました。"
    "あしたもまたいきたいとおもいます。"
)
HIRAGANA_RELATIONS = 54
HIRAGANA_HISTOGRAM = (0, 0, 0, 8, 19, 27)

MIXED_TEXT = (
    "日本語の文章には、ひらがなとカタカナと漢字がまざっています。"
    "これはテストです。"
)


def encode_chunks(text: str, encoding: str, chars_per_chunk: int) -> list[bytes]:
    """Encode *text* in chunks that always end on a character boundary."""
    return [
        text[i : i + chars_per_chunk].encode(encoding)
        for i in range(0, len(text), chars_per_chunk)
    ]


@pytest.fixture(params=["shift_jis", "euc-jp"])
def encoding(request: pytest.FixtureRequest) -> str:
    return request.param

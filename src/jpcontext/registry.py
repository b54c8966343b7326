"""Registry of supported encodings and their context analyses."""

from __future__ import annotations

import codecs

from jpcontext.analysis.context import (
    EUCJPContextAnalysis,
    JapaneseContextAnalysis,
    SJISContextAnalysis,
)

#: Canonical encoding name -> analysis class, in reporting order.
ANALYSES: dict[str, type[JapaneseContextAnalysis]] = {
    "shift_jis": SJISContextAnalysis,
    "euc-jp": EUCJPContextAnalysis,
}

# Python codec names (as returned by codecs.lookup) -> canonical name.
# Supersets share the hiragana rows of their base encoding.
_CODEC_TO_CANONICAL: dict[str, str] = {
    "shift_jis": "shift_jis",
    "cp932": "shift_jis",
    "shift_jis_2004": "shift_jis",
    "shift_jisx0213": "shift_jis",
    "euc_jp": "euc-jp",
    "euc_jis_2004": "euc-jp",
    "euc_jisx0213": "euc-jp",
}


def normalize_encoding_name(name: str) -> str | None:
    """Map any Python alias of a supported encoding to its canonical name.

    :param name: An encoding name such as ``"SJIS"``, ``"cp932"`` or ``"ujis"``.
    :returns: ``"shift_jis"``, ``"euc-jp"``, or ``None`` if unsupported.
    """
    try:
        codec_name = codecs.lookup(name).name
    except LookupError:
        return None
    return _CODEC_TO_CANONICAL.get(codec_name)


def create_analysis(name: str, **kwargs: int) -> JapaneseContextAnalysis:
    """Create a fresh analysis for encoding *name*.

    :param name: Any alias accepted by :func:`normalize_encoding_name`.
    :param kwargs: Threshold keyword arguments forwarded to the analysis.
    :raises ValueError: If *name* is not a supported encoding.
    """
    canonical = normalize_encoding_name(name)
    if canonical is None:
        msg = f"unsupported encoding for hiragana context analysis: {name!r}"
        raise ValueError(msg)
    return ANALYSES[canonical](**kwargs)

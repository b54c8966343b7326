"""Per-encoding character length and hiragana order resolution.

Each resolver looks at the character starting at ``data[pos]`` and returns
``(char_len, order)``: how many bytes the character occupies in its encoding,
and its hiragana order (0-82) or ``-1`` when it is not hiragana.

Resolvers are total over every byte value and never raise.  Lookahead bytes
past the end of *data* count as "not hiragana"; ``char_len`` is still the
length implied by the lead byte, so callers can detect a truncated character
by comparing ``pos + char_len`` with ``len(data)``.

:func:`get_resolver` looks a resolver up by canonical encoding name.
"""

from __future__ import annotations

from collections.abc import Callable

OrderResolver = Callable[[bytes | bytearray | memoryview, int], tuple[int, int]]

# ---------------------------------------------------------------------------
# Shift_JIS
#
# Lead bytes 0x81-0x9F and 0xE0-0xFC start a double-byte character.
# Hiragana occupy row 0x82 with trail bytes 0x9F (ぁ) through 0xF1 (ん).
# ---------------------------------------------------------------------------

_SJIS_HIRAGANA_LEAD = 0x82
_SJIS_HIRAGANA_FIRST = 0x9F
_SJIS_HIRAGANA_LAST = 0xF1


def sjis_order(
    data: bytes | bytearray | memoryview, pos: int = 0
) -> tuple[int, int]:
    """Resolve the Shift_JIS character at *pos*.

    :param data: The byte buffer being scanned.
    :param pos: Offset of a character boundary inside *data*.
    :returns: ``(char_len, order)``.
    """
    if pos >= len(data):
        return 1, -1
    lead = data[pos]
    if (0x81 <= lead <= 0x9F) or (0xE0 <= lead <= 0xFC):
        char_len = 2
    else:
        char_len = 1

    if lead == _SJIS_HIRAGANA_LEAD and pos + 1 < len(data):
        trail = data[pos + 1]
        if _SJIS_HIRAGANA_FIRST <= trail <= _SJIS_HIRAGANA_LAST:
            return char_len, trail - _SJIS_HIRAGANA_FIRST
    return char_len, -1


def is_cp932_lead(lead: int) -> bool:
    """Return True for Shift_JIS lead bytes that only CP932 assigns.

    0x87 is the NEC special characters row; 0xFA-0xFC are the IBM
    extensions.  Neither appears in plain Shift_JIS text.
    """
    return lead == 0x87 or 0xFA <= lead <= 0xFC


# ---------------------------------------------------------------------------
# EUC-JP
#
# 0x8E (SS2, half-width katakana) and 0xA1-0xFE start a two-byte character,
# 0x8F (SS3, JIS X 0212) starts a three-byte character.
# Hiragana occupy row 0xA4 with trail bytes 0xA1 (ぁ) through 0xF3 (ん).
# ---------------------------------------------------------------------------

_EUC_JP_HIRAGANA_LEAD = 0xA4
_EUC_JP_HIRAGANA_FIRST = 0xA1
_EUC_JP_HIRAGANA_LAST = 0xF3


def euc_jp_order(
    data: bytes | bytearray | memoryview, pos: int = 0
) -> tuple[int, int]:
    """Resolve the EUC-JP character at *pos*.

    :param data: The byte buffer being scanned.
    :param pos: Offset of a character boundary inside *data*.
    :returns: ``(char_len, order)``.
    """
    if pos >= len(data):
        return 1, -1
    lead = data[pos]
    if lead == 0x8E or 0xA1 <= lead <= 0xFE:
        char_len = 2
    elif lead == 0x8F:
        char_len = 3
    else:
        char_len = 1

    if lead == _EUC_JP_HIRAGANA_LEAD and pos + 1 < len(data):
        trail = data[pos + 1]
        if _EUC_JP_HIRAGANA_FIRST <= trail <= _EUC_JP_HIRAGANA_LAST:
            return char_len, trail - _EUC_JP_HIRAGANA_FIRST
    return char_len, -1


_RESOLVERS: dict[str, OrderResolver] = {
    "shift_jis": sjis_order,
    "euc-jp": euc_jp_order,
}


def get_resolver(name: str) -> OrderResolver:
    """Return the order resolver for a canonical encoding name.

    :param name: ``"shift_jis"`` or ``"euc-jp"``.
    :raises ValueError: If *name* has no resolver.
    """
    try:
        return _RESOLVERS[name]
    except KeyError:
        msg = f"no hiragana order resolver for encoding: {name!r}"
        raise ValueError(msg) from None

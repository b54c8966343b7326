# tests/test_enums.py
import enum

from jpcontext.enums import FrequencyCategory
from jpcontext.models import NUM_OF_CATEGORY


def test_frequency_category_is_int_enum():
    assert issubclass(FrequencyCategory, enum.IntEnum)


def test_frequency_category_covers_every_level():
    assert [int(m) for m in FrequencyCategory] == list(range(NUM_OF_CATEGORY))


def test_frequency_category_never_is_zero():
    assert FrequencyCategory.NEVER == 0
    assert FrequencyCategory.VERY_FREQUENT == 5

import pytest

from korfreq.josa import JOSA_ENDINGS, strip_josa


def k(s):
    return s.encode("utf-8")


@pytest.mark.parametrize(
    "word, expected",
    [
        ("국회의", "국회"),
        ("나라를", "나라"),
        ("우리나라에는", "우리나라"),
        ("대한민국으로", "대한민국"),
        ("때에는", "때에"),
        ("사람에게는", "사람에게"),
    ],
)
def test_strips_one_particle(word, expected):
    assert strip_josa(k(word)) == k(expected)


def test_only_one_particle_removed():
    assert strip_josa(k("대한민국에서는")) == k("대한민국에서")


def test_length_guard_is_strict():
    # 12 bytes is not more than twice the 6-byte "에서"
    assert strip_josa(k("학교에서")) == k("학교에서")
    # 6 bytes is not more than twice the 3-byte "은"
    assert strip_josa(k("좋은")) == k("좋은")


def test_single_syllable_untouched():
    assert strip_josa(k("가")) == k("가")


def test_no_match_passes_through():
    assert strip_josa(b"hello") == b"hello"
    assert strip_josa(k("언어이다")) == k("언어이다")


def test_priority_order_preserved():
    assert JOSA_ENDINGS[0] == k("에는")
    assert JOSA_ENDINGS[10] == k("에는")
    assert JOSA_ENDINGS[-1] == k("만")
    assert len(JOSA_ENDINGS) == 23

import pytest
from hypothesis import given, strategies as st

from kanahangul import Language, transliterate
from kanahangul.domain.transliterate import map_phonetics


@pytest.mark.parametrize(
    "text, expected",
    [
        ("新宿", "신주쿠"),
        ("フットサル", "풋살"),
        ("東京都", "도쿄도"),
        ("10:00-12:00", "10:00-12:00"),
        ("新宿駅", "신주쿠역"),
        ("ボンフィン", "본핀"),
        ("渋谷駅 徒歩5分", "시부야역 도보5분"),
        ("東京都新宿区", "도쿄도신주쿠구"),
    ],
)
def test_known_phrases(text, expected):
    assert transliterate(text, "ko") == expected


def test_katakana_with_nasal_and_long_vowel():
    assert transliterate("ラーメン", "ko") == "라멘"
    assert transliterate("ニンテンドー", "ko") == "닌텐도"


def test_three_char_compound_beats_two_char_prefix():
    assert map_phonetics("キャンプ") == "캔푸"
    assert map_phonetics("キャプ") == "캬푸"


def test_geminate_and_lone_small_tsu():
    assert transliterate("ガッツ", "ko") == "가쯔"
    assert transliterate("ッ", "ko") == ""


def test_hiragana():
    assert transliterate("さくら", "ko") == "사쿠라"
    assert transliterate("ほん", "ko") == "혼"


def test_kanji_fallback():
    assert transliterate("品", "ko") == "품"


def test_bare_nasal_without_syllable_is_kept():
    assert transliterate("ン", "ko") == "ㄴ"


def test_japanese_target_is_identity():
    assert transliterate("新宿フットサル", "ja") == "新宿フットサル"
    assert transliterate("新宿", Language.JA) == "新宿"


def test_language_enum_and_case():
    assert transliterate("新宿", Language.KO) == "신주쿠"
    assert transliterate("新宿", " KO ") == "신주쿠"


def test_empty_and_none():
    assert transliterate("", "ko") == ""
    assert transliterate(None, "ko") == ""


def test_unsupported_language():
    with pytest.raises(ValueError):
        transliterate("新宿", "en")


def test_unusual_unicode_passes_through():
    assert transliterate("\ud800", "ko") == "\ud800"
    assert transliterate("é", "ko") == "é"
    assert transliterate("😀", "ko") == "😀"


@given(st.text())
def test_ja_identity_law(text):
    assert transliterate(text, "ja") == text


@given(st.text())
def test_ko_is_total(text):
    assert isinstance(transliterate(text, "ko"), str)


@given(st.text(alphabet=st.characters(min_codepoint=0x30A0, max_codepoint=0x30FF)))
def test_katakana_runs_are_total(text):
    assert isinstance(transliterate(text, "ko"), str)

from __future__ import annotations

"""Japanese to Korean transliteration.

Three passes, each a pure string transform:

1. `apply_word_dictionary()` - place names, loanwords and set phrases
2. `map_phonetics()` - kana compounds, single kana, kanji readings
3. `compose_hangul()` - attach loose jamo (the ㄴ from ン/ん) to syllables

Anything none of the tables know about is passed through unchanged, so the
transform never fails on text input.
"""

import logging

from kanahangul.domain.enums import Language
from kanahangul.domain.hangul_compose import compose_hangul
from kanahangul.domain.kana_tables import (
    HIRAGANA_SINGLE,
    KATAKANA_COMPOUNDS,
    KATAKANA_SINGLE,
    PROLONGED_SOUND_MARK,
)
from kanahangul.domain.kanji_readings import KANJI_READINGS
from kanahangul.domain.word_dictionary import apply_word_dictionary

logger = logging.getLogger(__name__)


def _match_compound(text: str, pos: int) -> tuple[str, int] | None:
    for pattern, hangul in KATAKANA_COMPOUNDS:
        if text.startswith(pattern, pos):
            return hangul, len(pattern)
    return None


def map_phonetics(text: str) -> str:
    """Map kana and kanji to Hangul, one left-to-right scan."""
    if not text:
        return ""

    out: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        compound = _match_compound(text, i)
        if compound is not None:
            hangul, width = compound
            out.append(hangul)
            i += width
            continue

        ch = text[i]
        i += 1

        if ch == PROLONGED_SOUND_MARK:
            continue
        if ch in KATAKANA_SINGLE:
            out.append(KATAKANA_SINGLE[ch])
        elif ch in HIRAGANA_SINGLE:
            out.append(HIRAGANA_SINGLE[ch])
        elif ch in KANJI_READINGS:
            out.append(KANJI_READINGS[ch])
        else:
            out.append(ch)

    return "".join(out)


def transliterate(text: str | None, target_language: Language | str) -> str:
    """Render Japanese text for the given target language.

    Args:
        text: any string; Japanese, Latin, digits and punctuation may be mixed.
        target_language: "ja" returns `text` as is, "ko" runs the three passes.

    Returns:
        The transliterated string ("" for empty input).

    Raises:
        ValueError: if `target_language` is neither "ko" nor "ja".
    """
    lang = Language.parse(target_language)
    if not text:
        return ""
    if lang is Language.JA:
        return text

    words = apply_word_dictionary(text)
    mapped = map_phonetics(words)
    composed = compose_hangul(mapped)
    logger.debug("transliterate %r -> %r -> %r -> %r", text, words, mapped, composed)
    return composed

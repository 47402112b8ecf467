from __future__ import annotations

"""Find katakana and kanji that the transliteration tables don't cover.

Used when extending `kanji_readings.py`: feed it the titles and addresses of
scraped events and it lists the characters that would otherwise pass through
untransliterated.
"""

from dataclasses import dataclass
from typing import Final, Iterable

from kanahangul.domain.kana_tables import KATAKANA_SINGLE
from kanahangul.domain.kanji_readings import KANJI_READINGS

KATAKANA_RANGE: Final[tuple[str, str]] = ("゠", "ヿ")
KANJI_RANGE: Final[tuple[str, str]] = ("一", "龯")


@dataclass(frozen=True)
class ScriptChars:
    katakana: tuple[str, ...] = ()
    kanji: tuple[str, ...] = ()


def is_katakana(ch: str) -> bool:
    return KATAKANA_RANGE[0] <= ch <= KATAKANA_RANGE[1]


def is_kanji(ch: str) -> bool:
    return KANJI_RANGE[0] <= ch <= KANJI_RANGE[1]


def collect_script_chars(texts: Iterable[str]) -> ScriptChars:
    """Return the unique katakana and kanji in `texts`, in first-seen order."""
    seen: set[str] = set()
    katakana: list[str] = []
    kanji: list[str] = []

    for text in texts:
        if not isinstance(text, str):
            continue
        for ch in text:
            if ch in seen:
                continue
            seen.add(ch)
            if is_katakana(ch):
                katakana.append(ch)
            elif is_kanji(ch):
                kanji.append(ch)

    return ScriptChars(katakana=tuple(katakana), kanji=tuple(kanji))


def uncovered_chars(chars: ScriptChars) -> ScriptChars:
    # Small kana (ャ, ィ, ...) only resolve inside compounds, so they count as uncovered
    return ScriptChars(
        katakana=tuple(ch for ch in chars.katakana if ch not in KATAKANA_SINGLE),
        kanji=tuple(ch for ch in chars.kanji if ch not in KANJI_READINGS),
    )

from __future__ import annotations

"""Hangul composition helpers (domain layer).

This module has no I/O and no third-party dependencies.

It centralises:
- Hangul Jamo ordering constants (compatibility jamo)
- Decomposition of precomposed syllables back into jamo
- Pure functions for composing LVT syllables
- `compose_hangul()`, the pass that merges loose jamo left behind by the
  kana tables into proper syllable blocks

Primary API:
- compose_hangul(text)
"""

from dataclasses import dataclass
from typing import Final


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

HANGUL_BASE: Final[int] = 0xAC00
V_COUNT: Final[int] = len(JUNGSEONG)
T_COUNT: Final[int] = len(JONGSEONG)
HANGUL_COUNT: Final[int] = len(CHOSEONG) * V_COUNT * T_COUNT  # 11172


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


@dataclass(frozen=True)
class Jamo:
    initial: str
    medial: str
    final: str = ""


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def is_initial(ch: str) -> bool:
    return ch in _CHO_MAP


def is_medial(ch: str) -> bool:
    return ch in _JUNG_MAP


def is_final(ch: str) -> bool:
    # "" occupies slot 0 of JONGSEONG but is not a consonant
    return bool(ch) and ch in _JONG_MAP


def is_hangul_syllable(ch: str) -> bool:
    if len(ch) != 1:
        return False
    return HANGUL_BASE <= ord(ch) < HANGUL_BASE + HANGUL_COUNT


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def decompose_hangul(ch: str) -> Jamo | None:
    """Split a precomposed syllable into compatibility jamo.

    Returns None for anything that is not a single precomposed syllable.
    """
    if not is_hangul_syllable(ch):
        return None

    index = ord(ch) - HANGUL_BASE
    li = index // (V_COUNT * T_COUNT)
    vi = (index % (V_COUNT * T_COUNT)) // T_COUNT
    ti = index % T_COUNT
    return Jamo(CHOSEONG[li], JUNGSEONG[vi], JONGSEONG[ti])


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.

    Notes:
        This uses the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    li = _CHO_MAP.get(lead or "")
    vi = _JUNG_MAP.get(vowel or "")
    ti = _JONG_MAP.get(tail or "")

    if li is None or vi is None or ti is None:
        return ""

    return chr(HANGUL_BASE + (li * V_COUNT + vi) * T_COUNT + ti)


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, "")


def compose_hangul_syllable(initial: str, medial: str, final: str = "") -> str:
    """Lenient composition: give the jamo back untouched if they don't compose."""
    composed = compose_lvt(initial, medial, final)
    if composed:
        return composed
    return initial + medial + final


def compose_hangul(text: str) -> str:
    """Merge loose jamo into syllable blocks.

    Handles cases like "보ㄴ피ㄴ" -> "본핀" and "ㄱㅏㄴ" -> "간".

    A consonant sitting between two vowels is ambiguous: it could close the
    syllable on its left or open the one on its right. It is taken as a
    batchim unless the character after it is a vowel, in which case it is
    left to start the next syllable.
    """
    if not text:
        return ""

    def at(pos: int) -> str:
        return text[pos] if pos < len(text) else ""

    out: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = at(i + 1)

        if is_hangul_syllable(ch):
            if is_final(nxt) and not is_medial(at(i + 2)):
                jamo = decompose_hangul(ch)
                if jamo is not None and not jamo.final:
                    out.append(compose_hangul_syllable(jamo.initial, jamo.medial, nxt))
                    i += 2
                    continue
            out.append(ch)
            i += 1
            continue

        if is_initial(ch) and is_medial(nxt):
            third = at(i + 2)
            if is_final(third) and not is_medial(at(i + 3)):
                out.append(compose_hangul_syllable(ch, nxt, third))
                i += 3
            else:
                out.append(compose_hangul_syllable(ch, nxt))
                i += 2
            continue

        out.append(ch)
        i += 1

    return "".join(out)

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Target rendering language for transliterated text."""

    KO = "ko"
    JA = "ja"

    @classmethod
    def parse(cls, value: object) -> "Language":
        if isinstance(value, Language):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError("Unsupported target language: %r" % (value,))

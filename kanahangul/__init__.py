"""Japanese to Korean transliteration for event listings."""

from kanahangul.domain.enums import Language
from kanahangul.domain.transliterate import transliterate

__all__ = ["Language", "transliterate"]
__version__ = "0.1.0"

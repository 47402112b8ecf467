from __future__ import annotations

"""Apply the transliteration to the display fields of a scraped event."""

import re
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Final, Mapping

from kanahangul.domain.enums import Language
from kanahangul.domain.transliterate import transliterate

# Shortest leading run ending in a prefecture suffix: "神奈川県横浜市" -> "神奈川県"
REGION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^.+?[都道府県]")

# Checked in order; the first key contained in the status wins
STATUS_LABELS_KO: Final[Mapping[str, str]] = MappingProxyType({
    "受付け中": "접수중",
    "キャンセル待ち": "대기자 모집",
    "開催中止": "개최취소",
    "受付け終了": "접수마감",
    "空いたら通知": "빈자리 알림",
})


@dataclass(frozen=True)
class EventRecord:
    id: str
    date: str
    iso_date: str
    time: str
    title: str
    stadium: str
    address: str
    url: str
    booked: int = 0
    capacity: int = 0
    status: str = ""
    region: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "EventRecord":
        """Build a record from a row dict (snake_case or camelCase keys)."""
        iso_date = raw.get("iso_date")
        if iso_date is None:
            iso_date = raw.get("isoDate")
        region = raw.get("region")
        if not isinstance(region, str) or region in ("", "undefined"):
            region = extract_region(_text(raw.get("address")))

        return cls(
            id=_text(raw.get("id")),
            date=_text(raw.get("date")),
            iso_date=_text(iso_date),
            time=_text(raw.get("time")),
            title=_text(raw.get("title")),
            stadium=_text(raw.get("stadium")),
            address=_text(raw.get("address")),
            url=_text(raw.get("url")),
            booked=_count(raw.get("booked")),
            capacity=_count(raw.get("capacity")),
            status=_text(raw.get("status")),
            region=region,
        )


def extract_region(address: str) -> str | None:
    match = REGION_PATTERN.match(address or "")
    return match.group(0) if match else None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def translate_status(status: str, lang: Language | str) -> str:
    if Language.parse(lang) is Language.JA or not status:
        return status
    for key, label in STATUS_LABELS_KO.items():
        if key in status:
            return label
    return status


def localize_event(event: EventRecord, lang: Language | str) -> EventRecord:
    """Return a copy of `event` with its display fields rendered in `lang`."""
    lang = Language.parse(lang)
    if lang is Language.JA:
        return event

    return replace(
        event,
        title=transliterate(event.title, lang),
        stadium=transliterate(event.stadium, lang),
        address=transliterate(event.address, lang),
        region=transliterate(event.region, lang) if event.region is not None else None,
        status=translate_status(event.status, lang),
    )

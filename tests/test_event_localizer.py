from __future__ import annotations

from kanahangul.services.event_localizer import EventRecord, extract_region, localize_event, translate_status


def _raw() -> dict:
    return {
        "id": "2026-01-24_1",
        "date": "1.24 (sat)",
        "isoDate": "2026-01-24",
        "time": "10:00-12:00",
        "title": "新宿フットサル",
        "stadium": "フットサルステージ",
        "address": "東京都新宿区",
        "url": "https://example.com/e/1",
        "booked": "5",
        "capacity": None,
        "status": "受付け中",
        "region": "東京都",
    }


def test_from_mapping_normalises_fields() -> None:
    ev = EventRecord.from_mapping(_raw())
    assert ev.iso_date == "2026-01-24"
    assert ev.booked == 5
    assert ev.capacity == 0
    assert ev.region == "東京都"


def test_from_mapping_undefined_region_falls_back_to_address() -> None:
    raw = _raw()
    raw["region"] = "undefined"
    raw["iso_date"] = "2026-01-25"
    ev = EventRecord.from_mapping(raw)
    assert ev.region == "東京都"
    assert ev.iso_date == "2026-01-25"


def test_from_mapping_missing_fields() -> None:
    ev = EventRecord.from_mapping({})
    assert ev.title == ""
    assert ev.booked == 0
    assert ev.region is None


def test_localize_event_korean() -> None:
    ev = localize_event(EventRecord.from_mapping(_raw()), "ko")
    assert ev.title == "신주쿠풋살"
    assert ev.stadium == "풋살스테이지"
    assert ev.address == "도쿄도신주쿠구"
    assert ev.region == "도쿄도"
    assert ev.status == "접수중"
    assert ev.time == "10:00-12:00"
    assert ev.booked == 5


def test_localize_event_japanese_is_unchanged() -> None:
    ev = EventRecord.from_mapping(_raw())
    assert localize_event(ev, "ja") == ev


def test_translate_status() -> None:
    assert translate_status("キャンセル待ち(3)", "ko") == "대기자 모집"
    assert translate_status("開催中止", "ko") == "개최취소"
    assert translate_status("その他", "ko") == "その他"
    assert translate_status("受付け中", "ja") == "受付け中"
    assert translate_status("", "ko") == ""


def test_region_derived_from_address() -> None:
    ev = EventRecord.from_mapping({"address": "神奈川県横浜市中区", "region": None})
    assert ev.region == "神奈川県"
    assert localize_event(ev, "ko").region == "가나가와현"


def test_extract_region() -> None:
    assert extract_region("大阪府大阪市北区") == "大阪府"
    assert extract_region("北海道札幌市") == "北海道"
    assert extract_region("横浜市中区") is None
    assert extract_region("県") is None
    assert extract_region("") is None

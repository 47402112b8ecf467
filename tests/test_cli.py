import io
import json
from pathlib import Path

import pytest

import main
from kanahangul.services.settings_store import SettingsStore


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    path = tmp_path / "settings.yaml"
    SettingsStore(path).save({"language": "ko"})
    return path


def _run(argv, stdin_text=""):
    out = io.StringIO()
    code = main.run(argv, stdin=io.StringIO(stdin_text), stdout=out)
    return code, out.getvalue()


def test_text_arguments(settings_path):
    code, out = _run(["新宿", "フットサル", "--settings", str(settings_path)])
    assert code == 0
    assert out == "신주쿠\n풋살\n"


def test_reads_stdin_when_no_text(settings_path):
    code, out = _run(["--settings", str(settings_path)], "東京都\n10:00-12:00\n")
    assert code == 0
    assert out.splitlines() == ["도쿄도", "10:00-12:00"]


def test_language_from_settings(tmp_path):
    path = tmp_path / "settings.yaml"
    SettingsStore(path).set_language("ja")
    code, out = _run(["新宿", "--settings", str(path)])
    assert code == 0
    assert out == "新宿\n"


def test_lang_flag_overrides_settings(tmp_path):
    path = tmp_path / "settings.yaml"
    SettingsStore(path).set_language("ja")
    code, out = _run(["新宿", "--lang", "ko", "--settings", str(path)])
    assert out == "신주쿠\n"


def test_unsupported_lang(settings_path, capsys):
    code, out = _run(["新宿", "--lang", "en", "--settings", str(settings_path)])
    assert code == 2
    assert out == ""
    assert "Unsupported" in capsys.readouterr().err


def test_events_file(settings_path, tmp_path):
    events_path = tmp_path / "events.json"
    events_path.write_text(
        json.dumps(
            [
                {"id": "1", "title": "新宿フットサル", "status": "開催中止", "region": "東京都", "booked": 3},
                "not an event",
            ],
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    code, out = _run(["--events", str(events_path), "--settings", str(settings_path)])
    assert code == 0
    payload = json.loads(out)
    assert len(payload) == 1
    assert payload[0]["title"] == "신주쿠풋살"
    assert payload[0]["status"] == "개최취소"
    assert payload[0]["region"] == "도쿄도"
    assert payload[0]["booked"] == 3


def test_missing_events_file(settings_path, tmp_path):
    code, out = _run(["--events", str(tmp_path / "nope.json"), "--settings", str(settings_path)])
    assert code == 2
    assert out == ""


def test_empty_lang_is_rejected(settings_path):
    code, out = _run(["新宿", "--lang", "", "--settings", str(settings_path)])
    assert code == 2
    assert out == ""

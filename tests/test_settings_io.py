from pathlib import Path

import pytest
import yaml

from kanahangul.domain.enums import Language
from kanahangul.services.settings_store import SettingsStore


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    """A store pointed at a temp file so tests never touch the real settings.yaml."""
    return SettingsStore(tmp_path / "settings.yaml")


def test_save_and_load_roundtrip(store):
    payload = {"language": "ja", "log_level": "INFO"}
    store.save(payload)
    assert store.load() == payload


def test_saved_file_is_utf8_yaml(store):
    store.save({"note": "新宿"})
    raw = store.path.read_text(encoding="utf-8")
    assert "新宿" in raw
    assert yaml.safe_load(raw) == {"note": "新宿"}


def test_missing_file_defaults(store):
    assert store.load() == {}
    assert store.get_language() is Language.KO
    assert store.get_log_level() == "WARNING"


def test_malformed_yaml_is_ignored(store):
    store.path.write_text("language: [ko\n", encoding="utf-8")
    assert store.load() == {}
    assert store.get_language() is Language.KO


def test_invalid_language_falls_back(store):
    store.save({"language": "fr"})
    assert store.get_language() is Language.KO


def test_set_language_preserves_other_keys(store):
    store.save({"log_level": "DEBUG"})
    store.set_language("ja")
    loaded = store.load()
    assert loaded["language"] == "ja"
    assert loaded["log_level"] == "DEBUG"
    assert store.get_language() is Language.JA


def test_set_language_rejects_unknown(store):
    with pytest.raises(ValueError):
        store.set_language("en")


def test_log_level_normalised(store):
    store.save({"log_level": "debug"})
    assert store.get_log_level() == "DEBUG"
    store.save({"log_level": "loud"})
    assert store.get_log_level() == "WARNING"

"""Tests for charter.config SettingsStore."""

from pathlib import Path

import pytest

from charter.airports import DEFAULT_AIRPORTS_PATH
from charter.config import Settings, SettingsStore
from charter.models import AircraftClass


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "config.yaml")


class TestSettingsStore:
    def test_defaults_when_missing(self, store):
        settings = store.load()
        assert settings.airports_path == DEFAULT_AIRPORTS_PATH
        assert settings.suggestion_limit == 6
        assert settings.default_aircraft == AircraftClass.MIDSIZE

    def test_round_trip(self, store, tmp_path):
        store.save(
            Settings(
                airports_path=tmp_path / "a.json",
                suggestion_limit=4,
                default_aircraft=AircraftClass.LARGE,
            )
        )
        settings = store.load()
        assert settings.airports_path == tmp_path / "a.json"
        assert settings.suggestion_limit == 4
        assert settings.default_aircraft == AircraftClass.LARGE

    def test_partial_file(self, store):
        store.config_path.write_text("suggestion_limit: 3\n", encoding="utf-8")
        settings = store.load()
        assert settings.suggestion_limit == 3
        assert settings.default_aircraft == AircraftClass.MIDSIZE

    def test_corrupt_yaml_gives_defaults(self, store):
        store.config_path.write_text("suggestion_limit: [\n", encoding="utf-8")
        assert store.load() == Settings()

    def test_invalid_values_give_defaults(self, store, caplog):
        store.config_path.write_text("default_aircraft: Blimp\n", encoding="utf-8")
        assert store.load() == Settings()
        assert "Invalid settings" in caplog.text

    def test_bad_env_value_keeps_file_values(self, store, tmp_path, monkeypatch, caplog):
        store.config_path.write_text(f"airports_path: {tmp_path / 'a.json'}\n", encoding="utf-8")
        monkeypatch.setenv("CHARTER_SUGGESTION_LIMIT", "0")
        settings = store.load()
        assert settings.airports_path == tmp_path / "a.json"
        assert settings.suggestion_limit == 6
        assert "suggestion_limit" in caplog.text

    def test_bad_file_value_keeps_other_keys(self, store):
        store.config_path.write_text(
            "suggestion_limit: 3\ndefault_aircraft: Blimp\n", encoding="utf-8"
        )
        settings = store.load()
        assert settings.suggestion_limit == 3
        assert settings.default_aircraft == AircraftClass.MIDSIZE

    def test_undecodable_file_gives_defaults(self, store):
        store.config_path.write_bytes(b"suggestion_limit: \xff\xfe\n")
        assert store.load() == Settings()

    def test_non_mapping_ignored(self, store):
        store.config_path.write_text("- a\n- b\n", encoding="utf-8")
        assert store.load() == Settings()

    def test_env_overrides_file(self, store, monkeypatch):
        store.config_path.write_text("suggestion_limit: 3\n", encoding="utf-8")
        monkeypatch.setenv("CHARTER_SUGGESTION_LIMIT", "8")
        monkeypatch.setenv("CHARTER_AIRPORTS", "/data/airports.json")
        settings = store.load()
        assert settings.suggestion_limit == 8
        assert settings.airports_path == Path("/data/airports.json")

    def test_save_creates_parent(self, tmp_path):
        store = SettingsStore(tmp_path / "nested" / "dir" / "config.yaml")
        store.save(Settings())
        assert store.config_path.exists()


def test_default_path_is_home(isolated_config):
    assert SettingsStore().config_path == isolated_config

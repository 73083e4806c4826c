import sys
import os
import json

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gen3save.config import ExportConfig, Gen3SaveConfig, UserSettings


def test_config_round_trip(tmp_path):
    cfg = Gen3SaveConfig()
    cfg.database.db_path = "kb.db"
    cfg.export = ExportConfig(include_evs=False)
    path = tmp_path / "config.json"
    cfg.save(path)

    loaded = Gen3SaveConfig.load(path)
    assert loaded.database.db_path == "kb.db"
    assert loaded.export.include_evs is False
    assert loaded.export.include_level is True


def test_config_load_fills_missing_sections(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"export": {"use_nicknames": False}}))
    loaded = Gen3SaveConfig.load(path)
    assert loaded.database.db_path == "data/knowledge_base.db"
    assert loaded.export.use_nicknames is False


def test_settings_remember_last_path(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    assert UserSettings.load(path).last_save_path is None

    UserSettings(last_save_path="/saves/firered.sav").save(path)
    assert UserSettings.load(path).last_save_path == "/saves/firered.sav"


def test_corrupt_settings_load_as_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert UserSettings.load(path) == UserSettings()
    path.write_text("[1, 2]")
    assert UserSettings.load(path) == UserSettings()
    path.write_text(json.dumps({"last_save_path": 5}))
    assert UserSettings.load(path) == UserSettings()
    path.write_text(json.dumps({"last_save_path": ["a.sav"]}))
    assert UserSettings.load(path) == UserSettings()

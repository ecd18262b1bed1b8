import json

import pytest

from RPNCalc import config_manager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


def test_missing_file_falls_back_to_defaults(config_file):
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("decimal_places") == 10


def test_invalid_json_falls_back_to_defaults(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("darkmode") is False


def test_file_values_override_defaults(config_file):
    config_file.write_text(json.dumps({"darkmode": True}), encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["darkmode"] is True
    assert settings["decimal_places"] == 10


def test_unknown_key_returns_zero(config_file):
    assert config_manager.load_setting_value("does_not_exist") == 0


def test_save_and_reload(config_file):
    settings = config_manager.load_setting_value("all")
    settings["decimal_places"] = 4
    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("decimal_places") == 4
    assert json.loads(config_file.read_text(encoding="utf-8"))["decimal_places"] == 4


def test_save_failure_returns_empty_dict(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing_dir" / "config.json")
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_shipped_files_are_in_sync():
    values = json.loads(config_manager.PROJECT_ROOT.joinpath("config.json").read_text(encoding="utf-8"))
    descriptions = config_manager.load_setting_description("all")
    assert set(values) == set(descriptions) == set(config_manager.DEFAULT_SETTINGS)


@pytest.mark.parametrize("stored", ["3", 2.5, -1, True, None])
def test_invalid_decimal_places_fall_back_to_default(config_file, stored):
    config_file.write_text(json.dumps({"decimal_places": stored}), encoding="utf-8")
    assert config_manager.load_setting_value("decimal_places") == 10


def test_invalid_values_do_not_affect_valid_ones(config_file):
    config_file.write_text(json.dumps({"darkmode": "yes", "decimal_places": 3}), encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["darkmode"] is False
    assert settings["decimal_places"] == 3


def test_hand_edited_decimal_places_still_evaluates(config_file):
    from RPNCalc.calculator_state import CalculatorState

    config_file.write_text(json.dumps({"decimal_places": "3"}), encoding="utf-8")
    state = CalculatorState(decimal_places=config_manager.load_setting_value("decimal_places"))
    for symbol in ("1", "/", "3", "="):
        state.press(symbol)
    assert state.answer == "0.3333333333"

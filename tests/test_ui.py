import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from RPNCalc import config_manager  # noqa: E402
from RPNCalc import UI  # noqa: E402


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(app, tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "config.json")
    calculator = UI.CalculatorWindow()
    yield calculator
    calculator.close()


def click(window, *labels):
    for label in labels:
        window.button_objects[label].click()


def test_buttons_drive_the_display(window):
    click(window, "(", "1", "5", "+", "7", ")", "/", "2", "=")
    assert window.expression_display.text() == "(15+7)/2"
    assert window.answer_display.text() == "11"


def test_error_shows_fixed_text(window):
    click(window, "1", "+", "=")
    assert window.answer_display.text() == "Error"
    assert "3105" in window.answer_display.toolTip()


def test_clear_button(window):
    click(window, "9", "=", "AC")
    assert window.expression_display.text() == "0"
    assert window.answer_display.text() == "0"


def test_settings_dialog_saves_decimal_places(window):
    dialog = UI.SettingsDialog(window)
    dialog.widgets["decimal_places"].setText("3")
    dialog.save_settings()
    assert config_manager.load_setting_value("decimal_places") == 3


def test_saved_settings_reach_the_open_window(window):
    dialog = UI.SettingsDialog(window)
    dialog.settings_saved.connect(window.apply_settings)
    dialog.widgets["decimal_places"].setText("2")
    dialog.widgets["darkmode"].setChecked(True)
    dialog.save_settings()
    assert window.state.decimal_places == 2
    assert window.setting_value_list["darkmode"] is True
    click(window, "2", "/", "3", "=")
    assert window.answer_display.text() == "0.67"

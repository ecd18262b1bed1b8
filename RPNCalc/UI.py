# UI.py
"""""PySide6 user interface for the RPN Calculator.

Structure
---------
- CalculatorWindow: main window with the two-line display and the button grid
- SettingsDialog:   modal dialog for user preferences

Responsibilities (CalculatorWindow)
-----------------------------------
- Build window, display, layout and buttons
- Forward clicks and key presses to CalculatorState
- Render expression and answer ("Error" on any MathError)
- Clipboard integration (Ctrl+C copies the answer, Ctrl+V pastes into the expression)

Responsibilities (Settings)
---------------------------
- Load current settings and their descriptions via config_manager
- Validate user input (decimal places must be a non-negative integer)
- Save and apply theme changes immediately

Evaluation is linear in the input length, so it runs directly on the UI thread.
"""""

import sys
import logging

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, Signal
import pyperclip

from . import error as E
from . import config_manager as config_manager
from .calculator_state import CalculatorState, CLEAR, DELETE, EQUALS, PERCENT
from .keyboard_helper import key_to_symbol

logger = logging.getLogger(__name__)

SETTINGS_BUTTON = "⚙"

# (text, row, column, column span)
BUTTONS = [
    (CLEAR, 0, 0, 1), (PERCENT, 0, 1, 1), (DELETE, 0, 2, 1), ('/', 0, 3, 1),
    ('7', 1, 0, 1), ('8', 1, 1, 1), ('9', 1, 2, 1), ('*', 1, 3, 1),
    ('4', 2, 0, 1), ('5', 2, 1, 1), ('6', 2, 2, 1), ('-', 2, 3, 1),
    ('1', 3, 0, 1), ('2', 3, 1, 1), ('3', 3, 2, 1), ('+', 3, 3, 1),
    ('(', 4, 0, 1), ('0', 4, 1, 1), ('.', 4, 2, 1), (')', 4, 3, 1),
    (SETTINGS_BUTTON, 5, 0, 1), (EQUALS, 5, 1, 3),
]

OPERATOR_BUTTONS = ('/', '*', '-', '+', PERCENT)

DARK_BUTTON = "background-color: #121212; color: white; font-weight: bold;"
DARK_OPERATOR_BUTTON = "background-color: #2e2e2e; color: #ff9f0a; font-weight: bold;"
EQUALS_BUTTON = "background-color: #007bff; color: white; font-weight: bold;"


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Boolean settings become checkboxes, integer settings
    become input fields; everything else is left untouched.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 160)

        main_layout = QtWidgets.QVBoxLayout(self)

        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            # bool first: isinstance(True, int) is True
            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + ":")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))
                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        new_settings = dict(self.setting_value_list)

        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QCheckBox):
                new_settings[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()
                if new_value_str == "":
                    continue  # blank keeps the old value

                try:
                    new_value_int = int(new_value_str)
                    if key_value == "decimal_places" and new_value_int < 0:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 0.")
                except ValueError as e:
                    logger.warning("Invalid input for %s: %s", key_value, e)
                    QtWidgets.QMessageBox.critical(
                        self, "Invalid Input:",
                        f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return

                new_settings[key_value] = new_value_int

        if config_manager.save_setting(new_settings) == {}:
            QtWidgets.QMessageBox.critical(self, "Error", E.ERROR_MESSAGES["5001"])
            return

        self.setting_value_list = new_settings
        self.settings_saved.emit()
        self.update_darkmode()
        self.accept()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        self.setting_value_list = config_manager.load_setting_value("all")
        self.state = CalculatorState(decimal_places=self.setting_value_list["decimal_places"])
        self.button_objects = {}

        self.setWindowTitle("Calculator")
        self.resize(320, 480)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- Display: expression on top, answer below ---
        self.expression_display = QtWidgets.QLineEdit()
        self.answer_display = QtWidgets.QLineEdit()
        for line, point_size in ((self.expression_display, 18), (self.answer_display, 36)):
            line.setAlignment(Qt.AlignmentFlag.AlignRight)
            line.setReadOnly(True)
            line.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            font = line.font()
            font.setPointSize(point_size)
            line.setFont(font)
            main_v_layout.addWidget(line)

        # --- Button grid ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 3)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        for text, row, col, span in BUTTONS:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)

            if text == SETTINGS_BUTTON:
                button.clicked.connect(self.open_settings)
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            button_grid.addWidget(button, row, col, 1, span)
            self.button_objects[text] = button

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.update_darkmode()
        self.refresh_display()

    # --- Input ---
    def handle_button_press(self, value):
        self.state.press(value)
        self.refresh_display()

    def keyPressEvent(self, event):
        modifiers = event.modifiers()
        if modifiers & Qt.KeyboardModifier.ControlModifier:
            if event.key() == Qt.Key.Key_C:
                self.copy_answer()
                return
            if event.key() == Qt.Key.Key_V:
                self.paste_expression()
                return

        symbol = key_to_symbol(event.key())
        if symbol is None:
            super().keyPressEvent(event)
            return
        self.handle_button_press(symbol)

    # --- Clipboard ---
    def copy_answer(self):
        try:
            pyperclip.copy(self.state.answer)
        except pyperclip.PyperclipException as e:
            logger.warning("%s %s", E.ERROR_MESSAGES["4001"], e)

    def paste_expression(self):
        clipboard_text = QtWidgets.QApplication.clipboard().text()
        if not clipboard_text:
            return
        self.state.paste(clipboard_text)
        if self.setting_value_list["after_paste_enter"]:
            self.state.evaluate()
        self.refresh_display()

    # --- Rendering ---
    def refresh_display(self):
        self.expression_display.setText(self.state.expression)
        self.answer_display.setText(self.state.answer)

        error = self.state.last_error
        if error is not None:
            self.answer_display.setToolTip(
                f"Error {error.code}: {E.ERROR_MESSAGES.get(error.code, 'Unknown error')}\n{error.message}")
        else:
            self.answer_display.setToolTip("")

    def update_darkmode(self):
        darkmode = self.setting_value_list["darkmode"]
        for text, button in self.button_objects.items():
            if text == EQUALS:
                button.setStyleSheet(EQUALS_BUTTON)
            elif darkmode and text in OPERATOR_BUTTONS:
                button.setStyleSheet(DARK_OPERATOR_BUTTON)
            elif darkmode:
                button.setStyleSheet(DARK_BUTTON)
            else:
                button.setStyleSheet("font-weight: normal;")

        if darkmode:
            self.setStyleSheet("background-color: #121212;")
            display_style = "background-color: #121212; color: white; font-weight: bold;"
        else:
            self.setStyleSheet("")
            display_style = "font-weight: bold;"
        self.expression_display.setStyleSheet(display_style)
        self.answer_display.setStyleSheet(display_style)

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.settings_saved.connect(self.apply_settings)
        settings_dialog.exec()

    def apply_settings(self):
        # Reload so darkmode / decimal places apply right away
        self.setting_value_list = config_manager.load_setting_value("all")
        self.state.decimal_places = self.setting_value_list["decimal_places"]
        self.update_darkmode()


def main():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    logger.info("Calculator window started")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

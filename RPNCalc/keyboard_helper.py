# keyboard_helper.py
"""Maps Qt key codes to the symbols understood by CalculatorState.press()."""

from PySide6.QtCore import Qt

from .calculator_state import CLEAR, DELETE, EQUALS, PERCENT


def _code(key):
    # QKeyEvent.key() hands out plain ints, Qt.Key members are enums.
    return getattr(key, "value", key)


# Keypad keys report the same codes as the main row (plus KeypadModifier),
# so one entry covers both.
KEY_SYMBOLS = {
    _code(Qt.Key.Key_0): "0",
    _code(Qt.Key.Key_1): "1",
    _code(Qt.Key.Key_2): "2",
    _code(Qt.Key.Key_3): "3",
    _code(Qt.Key.Key_4): "4",
    _code(Qt.Key.Key_5): "5",
    _code(Qt.Key.Key_6): "6",
    _code(Qt.Key.Key_7): "7",
    _code(Qt.Key.Key_8): "8",
    _code(Qt.Key.Key_9): "9",

    _code(Qt.Key.Key_Plus): "+",
    _code(Qt.Key.Key_Minus): "-",
    _code(Qt.Key.Key_Asterisk): "*",
    _code(Qt.Key.Key_Slash): "/",
    _code(Qt.Key.Key_Period): ".",
    _code(Qt.Key.Key_ParenLeft): "(",
    _code(Qt.Key.Key_ParenRight): ")",

    _code(Qt.Key.Key_Enter): EQUALS,
    _code(Qt.Key.Key_Return): EQUALS,
    _code(Qt.Key.Key_Equal): EQUALS,
    _code(Qt.Key.Key_Percent): PERCENT,

    _code(Qt.Key.Key_Backspace): DELETE,
    _code(Qt.Key.Key_Delete): DELETE,
    _code(Qt.Key.Key_Escape): CLEAR,
}


def key_to_symbol(key):
    """Return the calculator symbol for a Qt key code, or None if the key has no meaning."""
    return KEY_SYMBOLS.get(_code(key))

import pytest

QtCore = pytest.importorskip("PySide6.QtCore")
Qt = QtCore.Qt

from RPNCalc.keyboard_helper import key_to_symbol  # noqa: E402


@pytest.mark.parametrize("key, expected", [
    (Qt.Key.Key_0, "0"),
    (Qt.Key.Key_9, "9"),
    (Qt.Key.Key_Plus, "+"),
    (Qt.Key.Key_Minus, "-"),
    (Qt.Key.Key_Asterisk, "*"),
    (Qt.Key.Key_Slash, "/"),
    (Qt.Key.Key_Period, "."),
    (Qt.Key.Key_ParenLeft, "("),
    (Qt.Key.Key_ParenRight, ")"),
    (Qt.Key.Key_Enter, "="),
    (Qt.Key.Key_Return, "="),
    (Qt.Key.Key_Percent, "%"),
    (Qt.Key.Key_Backspace, "DEL"),
    (Qt.Key.Key_Delete, "DEL"),
    (Qt.Key.Key_Escape, "AC"),
])
def test_mapped_keys(key, expected):
    assert key_to_symbol(key) == expected


def test_plain_int_codes_are_accepted():
    # QKeyEvent.key() returns an int
    assert key_to_symbol(ord("5")) == "5"
    assert key_to_symbol(ord("+")) == "+"


@pytest.mark.parametrize("key", [Qt.Key.Key_A, Qt.Key.Key_Shift, Qt.Key.Key_F1, Qt.Key.Key_Comma])
def test_unmapped_keys(key):
    assert key_to_symbol(key) is None

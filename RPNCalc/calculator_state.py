# calculator_state.py
"""""
Display state of the calculator window, kept free of Qt so it can be tested.

The window owns one CalculatorState and forwards every button click and
mapped key press to press(). The state keeps two strings:

- expression: what the user typed, "0" when empty
- answer:     the last rendered result, or "Error"
"""""

import logging

from . import error as E
from . import MathEngine

logger = logging.getLogger(__name__)

CLEAR = "AC"
DELETE = "DEL"
EQUALS = "="
PERCENT = "%"
ERROR_TEXT = "Error"

OPERATOR_SYMBOLS = ("+", "-", "*", "/")
INPUT_SYMBOLS = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9", ".", "(", ")") + OPERATOR_SYMBOLS


class CalculatorState:
    def __init__(self, decimal_places=None):
        self.decimal_places = decimal_places
        self.expression = "0"
        self.answer = "0"
        self.last_error = None

    def press(self, symbol):
        """Apply one button / key symbol. Unknown symbols (and None) are ignored."""
        if symbol == CLEAR:
            self.clear()
        elif symbol == DELETE:
            self.delete()
        elif symbol == EQUALS:
            self.evaluate()
        elif symbol == PERCENT:
            self.evaluate(percent=True)
        elif symbol in INPUT_SYMBOLS:
            self.input(symbol)
        else:
            return False
        return True

    def input(self, character):
        # A lone "0" is a placeholder, unless it becomes the left operand.
        if self.expression == "0" and character not in OPERATOR_SYMBOLS:
            self.expression = ""
        self.expression += character

    def paste(self, text):
        cleaned = "".join(text.split())
        if not cleaned:
            return
        if self.expression == "0" and cleaned[0] not in OPERATOR_SYMBOLS:
            self.expression = ""
        self.expression += cleaned

    def clear(self):
        self.expression = "0"
        self.answer = "0"
        self.last_error = None

    def delete(self):
        self.expression = self.expression[:-1]
        if self.expression == "":
            self.expression = "0"

    def evaluate(self, percent=False):
        try:
            self.answer = MathEngine.calculate(self.expression, percent=percent,
                                               decimal_places=self.decimal_places)
            self.last_error = None
        except E.MathError as e:
            logger.debug("Error %s in %r: %s", e.code, e.equation, e.message)
            self.answer = ERROR_TEXT
            self.last_error = e
        return self.answer

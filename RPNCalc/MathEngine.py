# MathEngine.py
"""""
Public entry points of the calculator core.

Pipeline
--------
1) Parser.parse:       raw input string → postfix token list (shunting-yard)
2) RPNEngine.process:  postfix token list → float
3) format_result:      float → display string (used by calculate)

The core is stateless: nothing survives between calls except the operator
precedence table, so evaluate() may be called from any thread.
"""""

import math

from . import error as E
from . import Parser
from . import RPNEngine


DEFAULT_DECIMAL_PLACES = 10

# Beyond this, int(value) would print every digit of a float's integer part.
MAX_PLAIN_INTEGER = 1e16


def evaluate(expression):
    """Evaluate an arithmetic expression and return its float value.

    Raises a MathError subclass with .equation set to the input on failure.
    """
    try:
        postfix = Parser.parse(expression)
        return RPNEngine.process(postfix)
    except E.MathError as e:
        e.equation = expression
        raise


def format_result(ergebnis, decimal_places=DEFAULT_DECIMAL_PLACES):
    """Render a float for the display.

    Integral values lose their '.0', everything else is rounded to
    decimal_places. inf / -inf / nan are rendered as such.
    """
    if not math.isfinite(ergebnis):
        return str(ergebnis)

    if abs(ergebnis) < MAX_PLAIN_INTEGER and ergebnis == int(ergebnis):
        return str(int(ergebnis))

    gerundet = round(ergebnis, decimal_places)
    if abs(gerundet) < MAX_PLAIN_INTEGER and gerundet == int(gerundet):
        return str(int(gerundet))
    return str(gerundet)


def calculate(problem, percent=False, decimal_places=None):
    """Evaluate and format; percent mode divides the result by 100 first."""
    if decimal_places is None:
        decimal_places = DEFAULT_DECIMAL_PLACES

    ergebnis = evaluate(problem)
    if percent:
        ergebnis = ergebnis / 100.0
    return format_result(ergebnis, decimal_places)


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem (empty line to quit): ")
    while True:
        problem = input("> ")
        if problem.strip() == "":
            break
        try:
            print("= " + calculate(problem))
        except E.MathError as e:
            print(f"Error {e.code}: {e.message}")


if __name__ == "__main__":
    # python -m RPNCalc.MathEngine
    test_main()

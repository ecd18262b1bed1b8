# RPNEngine.py
"""Evaluates a postfix token sequence produced by Parser.parse."""

from . import error as E
from .token_system import Number, Operator


def process(tokens):
    """Return the float value of a postfix token sequence.

    Raises:
        NoInputError:   the sequence is empty
        ArgumentsError: an operator found fewer than two values on the stack
        OperatorError:  the scan ended with zero or several values on the stack
    """
    if len(tokens) == 0:
        raise E.NoInputError()

    values = []
    for token in tokens:
        if isinstance(token, Number):
            values.append(token.value)

        elif isinstance(token, Operator):
            if len(values) < 2:
                raise E.ArgumentsError()
            # The first pop is the right-hand operand.
            right = values.pop()
            left = values.pop()
            values.append(token.apply(left, right))

        else:
            raise TypeError(f"Unexpected token in postfix sequence: {token!r}")

    if len(values) != 1:
        raise E.OperatorError()
    return values[0]

# token_system.py
"""""
Tokens and operators shared by the Parser and the RPN engine.

Token kinds
-----------
- Number:     numeric literal; keeps the text as typed plus its float value
- Operator:   one of the four binary operators
- OpenParen:  '(' marker, only ever lives on the operator stack
- CloseParen: ')' marker, consumed by the shunting-yard pass
"""""

import math
from enum import Enum
from types import MappingProxyType


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self):
        return self.value

    @property
    def precedence(self):
        return OPERATOR_PRECEDENCE[self.value]

    def apply(self, left, right):
        """Apply the operator to two floats: left <operator> right."""
        if self is BinaryOperator.ADD:
            return left + right
        elif self is BinaryOperator.SUBTRACT:
            return left - right
        elif self is BinaryOperator.MULTIPLY:
            return left * right
        elif self is BinaryOperator.DIVIDE:
            return divide(left, right)
        raise ValueError(f"Unknown operator: {self!r}")

    @classmethod
    def from_symbol(cls, symbol):
        return cls(symbol)


# Read-only, built once per process.
OPERATOR_PRECEDENCE = MappingProxyType({
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
})


def divide(left, right):
    """IEEE-754 division: x/0 gives a signed infinity, 0/0 gives nan."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        # copysign keeps the sign of -0.0 in the denominator
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Token:
    """Base class; position is the index in the whitespace-stripped input."""
    position = None

    def __eq__(self, other):
        return type(self) is type(other) and str(self) == str(other)

    def __hash__(self):
        return hash((type(self).__name__, str(self)))


class Number(Token):
    """Numeric literal. Raises ValueError if text is not a valid float literal."""
    def __init__(self, text, position=None):
        self.text = text
        self.value = float(text)
        self.position = position

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"Number({self.text!r})"


class Operator(Token):
    def __init__(self, operator, position=None):
        if not isinstance(operator, BinaryOperator):
            operator = BinaryOperator.from_symbol(operator)
        self.operator = operator
        self.position = position

    @property
    def precedence(self):
        return self.operator.precedence

    def apply(self, left, right):
        return self.operator.apply(left, right)

    def __str__(self):
        return self.operator.symbol

    def __repr__(self):
        return f"Operator({self.operator.symbol!r})"


class OpenParen(Token):
    def __init__(self, position=None):
        self.position = position

    def __str__(self):
        return "("

    def __repr__(self):
        return "OpenParen()"


class CloseParen(Token):
    def __init__(self, position=None):
        self.position = position

    def __str__(self):
        return ")"

    def __repr__(self):
        return "CloseParen()"

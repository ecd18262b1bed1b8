# Parser.py
"""""
Infix → postfix conversion for the calculator.

Pipeline
--------
1) strip_whitespace: whitespace is never significant.
2) tokenize: splits the stripped string into Number / Operator / OpenParen / CloseParen tokens.
3) parse: shunting-yard over the tokens, returning them in postfix (RPN) order.

Positions carried by tokens and errors are indices into the stripped string.
"""""

from . import error as E
from .token_system import OPERATOR_PRECEDENCE, Number, Operator, OpenParen, CloseParen


DECIMAL_POINT = "."


def strip_whitespace(expression):
    return "".join(ch for ch in expression if not ch.isspace())


def is_digit(character):
    """ASCII digits only; str.isdigit would also accept '²' or '٣'."""
    return "0" <= character <= "9"


def scan_number(problem, start):
    """Consume one number run beginning at start.

    Returns:
        (Number token, index of the first character after the run)
    """
    b = start
    has_point = False
    has_digit = False

    while b < len(problem) and (is_digit(problem[b]) or problem[b] == DECIMAL_POINT):
        if problem[b] == DECIMAL_POINT:
            if has_point:
                raise E.SyntaxError(DECIMAL_POINT, b, code="3008",
                                    message=f"More than one '.' in number at index {b}")
            has_point = True
        else:
            has_digit = True
        b += 1

    if not has_digit:
        # a lone '.'
        raise E.SyntaxError(problem[start], start)

    return Number(problem[start:b], position=start), b


def iter_tokens(expression):
    """Yield tokens left to right; a bad character only fails once the scan reaches it."""
    problem = strip_whitespace(expression)
    b = 0

    while b < len(problem):
        current_char = problem[b]

        if is_digit(current_char) or current_char == DECIMAL_POINT:
            number, b = scan_number(problem, b)
            yield number
            continue

        if current_char in OPERATOR_PRECEDENCE:
            yield Operator(current_char, position=b)
        elif current_char == "(":
            yield OpenParen(position=b)
        elif current_char == ")":
            yield CloseParen(position=b)
        else:
            raise E.SyntaxError(current_char, b)

        b += 1


def tokenize(expression):
    """Convert the raw input into a flat token list (infix order)."""
    return list(iter_tokens(expression))


def pop_operators(incoming, operators, output):
    # Equal precedence pops too, which makes the operators left associative.
    while operators and isinstance(operators[-1], Operator) \
            and incoming.precedence <= operators[-1].precedence:
        output.append(operators.pop())


def close_parenthesis(token, operators, output):
    while operators and not isinstance(operators[-1], OpenParen):
        output.append(operators.pop())

    if not operators:
        raise E.CloseParenthesesError(token.position)

    operators.pop()  # the matching '(' is dropped, never emitted


def parse(expression):
    """Parse an infix expression into a postfix token list.

    Raises:
        SyntaxError, OpenParenthesesError, CloseParenthesesError
    """
    output = []
    operators = []

    for token in iter_tokens(expression):
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            pop_operators(token, operators, output)
            operators.append(token)
        elif isinstance(token, OpenParen):
            operators.append(token)
        elif isinstance(token, CloseParen):
            close_parenthesis(token, operators, output)

    while operators:
        token = operators.pop()
        if isinstance(token, OpenParen):
            raise E.OpenParenthesesError(token.position)
        output.append(token)

    return output

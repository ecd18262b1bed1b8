# error.py
"""""
Error types raised by the calculator core.

Every failure of the parser or the RPN evaluator is a MathError carrying a
four digit code (see ERROR_MESSAGES) and, once it leaves MathEngine, the
equation that caused it.
"""""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class ParseError(MathError):
    pass


class EvaluationError(MathError):
    pass


# --- Parser errors ---

class SyntaxError(ParseError):
    """Unknown character (or malformed number) at a position of the stripped input."""
    def __init__(self, character, position, code="3100", message=None):
        if message is None:
            message = f'Unknown token "{character}" at index {position}'
        super().__init__(message, code=code)
        self.character = character
        self.position = position


class OpenParenthesesError(ParseError):
    def __init__(self, position=None):
        super().__init__('Could not find pair for "("', code="3101")
        self.position = position


class CloseParenthesesError(ParseError):
    def __init__(self, position):
        super().__init__(f'Could not find pair for ")" at index {position}', code="3102")
        self.position = position


# --- Evaluator errors ---

class NoInputError(EvaluationError):
    def __init__(self):
        super().__init__("Nothing to process", code="3103")


class OperatorError(EvaluationError):
    def __init__(self):
        super().__init__("Insufficient amount of operators", code="3104")


class ArgumentsError(EvaluationError):
    def __init__(self):
        super().__init__("Insufficient amount of arguments", code="3105")


Error_Dictionary = {

    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification (0 = tokenizer, 1 = parser / evaluator)
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "3008" : "More than one '.' in one number.",
    "3100" : "Unexpected Token: ", # + Token
    "3101" : "Missing ')'. ",
    "3102" : "Missing '('. ",
    "3103" : "Nothing to calculate.",
    "3104" : "Missing Operator.",
    "3105" : "Missing Number.",

    "4001" : "Clipboard not available.",

    "5001" : "Settings could not be saved.",

    "9999" : "Unexpected Error: " #+error
}

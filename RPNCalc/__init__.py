"""RPN calculator core: shunting-yard parser and postfix evaluator."""
from .MathEngine import evaluate, calculate, format_result
from .Parser import parse, tokenize
from .RPNEngine import process

__all__ = ['evaluate', 'calculate', 'format_result', 'parse', 'tokenize', 'process']

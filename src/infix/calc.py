'''
Entry points: text in, number (or formatted text) out.
'''

from .evaluator import evaluate
from .lexer import tokenize
from .parser import parse
from .util import EvaluationError


def evaluate_expression(text):
    '''
    Evaluate an infix arithmetic expression.

    :raises EvaluationError: on any user error, lexing through evaluation.
    '''
    return evaluate(parse(tokenize(text)))


def calc(text):
    '''
    Return the result to two decimal places, or the error's debug repr.
    '''
    try:
        return '{:.2f}'.format(evaluate_expression(text))
    except EvaluationError as e:
        return repr(e)


def alert(text, notify):
    '''
    Report the outcome of evaluating text through a host callback.

    For hosts that take a notification rather than a return value.

    :param notify: Callable taking a single string; called exactly once.
    '''
    notify(calc(text))

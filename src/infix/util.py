from functools import wraps
import logging


class EvaluationError(Exception):
    '''
    Base of every user error raised while evaluating an expression.

    ``repr()`` gives the debug representation shown to users, e.g.
    ``BadToken('e')`` or ``MissingOperand``.
    '''
    message = 'Evaluation failed'

    def __repr__(self):
        name = type(self).__name__
        if not self.args:
            return name
        return '{}({})'.format(name, ', '.join(map(repr, self.args)))

    def __str__(self):
        if not self.args:
            return self.message
        return '{}: {}'.format(self.message,
                               ', '.join(map(repr, self.args)))

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class BadToken(EvaluationError):
    message = 'Unexpected character'

    def __init__(self, char):
        super().__init__(char)
        self.char = char


class BadNumber(EvaluationError):
    message = 'Malformed number'

    def __init__(self, lexeme):
        super().__init__(lexeme)
        self.lexeme = lexeme


class MissingLeftParenthesis(EvaluationError):
    message = 'Closing parenthesis without a matching opening one'


class MissingRightParenthesis(EvaluationError):
    message = 'Opening parenthesis without a matching closing one'


class MissingOperand(EvaluationError):
    message = 'Operator is missing an operand'


class NotSingleResultInStack(EvaluationError):
    message = 'Expression does not reduce to a single value'


def wrap_user_errors(error):
    '''
    Decorator that converts unexpected exceptions to the user error ``error``.

    The decorated function's positional arguments become the error's
    arguments. Passes through EvaluationErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except EvaluationError:
                raise
            except Exception as e:
                raise error(*args, **kwargs) from e
        return wrapper
    return decorator


def configure_logging(verbose=False):
    '''
    Send log records to stderr; debug level if verbose.
    '''
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True,
    )

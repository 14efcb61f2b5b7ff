import logging
import math
import operator

from .lexer import Number, Operator, OperatorToken
from .util import MissingOperand, NotSingleResultInStack


logger = logging.getLogger(__name__)


def _truediv(left, right):
    '''
    IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN.
    '''
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Evaluator:
    '''
    Reduces a postfix token sequence on a value stack.
    '''

    # left <op> right
    BUILTINS = {
        Operator.ADD: operator.__add__,
        Operator.SUB: operator.__sub__,
        Operator.MULT: operator.__mul__,
        Operator.DIV: _truediv,
    }

    def __init__(self, postfix):
        self.postfix = postfix
        self.stack = []

    def _popstack(self):
        if not self.stack:
            raise MissingOperand()
        return self.stack.pop()

    def evaluate(self):
        '''
        Return the value of the postfix sequence; 0.0 if it is empty.

        :raises MissingOperand: when an operator lacks a value.
        :raises NotSingleResultInStack: when values are left over.
        '''
        for token in self.postfix:
            if isinstance(token, Number):
                self.stack.append(float(token.value))
            elif isinstance(token, OperatorToken):
                right = self._popstack()
                left = self._popstack()
                self.stack.append(type(self).BUILTINS[token.kind](left,
                                                                  right))
            else:
                # Parser bug, not user error.
                raise AssertionError(
                    'Unexpected token in postfix sequence: {!r}'.format(token))

        if len(self.stack) > 1:
            raise NotSingleResultInStack()
        result = self.stack.pop() if self.stack else 0.0
        logger.debug('result: %r', result)
        return result


def evaluate(postfix):
    '''
    Return the value of a postfix token sequence.
    '''
    return Evaluator(postfix).evaluate()

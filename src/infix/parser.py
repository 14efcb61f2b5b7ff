'''
Shunting-Yard: infix tokens to postfix (RPN) tokens.
'''

from enum import Enum
import logging

from .lexer import EOF, LPAREN, RPAREN, Number, Operator, OperatorToken
from .util import MissingLeftParenthesis, MissingRightParenthesis


logger = logging.getLogger(__name__)


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


_LOW = {Operator.ADD, Operator.SUB}
_HIGH = {Operator.MULT, Operator.DIV}

# Only comparable across tiers; anything not listed is EQUAL.
PRECEDENCE = {}
for _low in _LOW:
    for _high in _HIGH:
        PRECEDENCE[_low, _high] = Ordering.LESS
        PRECEDENCE[_high, _low] = Ordering.GREATER
del _low, _high


def precedence(left, right):
    '''
    Compare the binding strength of two operators.
    '''
    return PRECEDENCE.get((left, right), Ordering.EQUAL)


class Parser:
    '''
    Reorders an infix token stream into postfix order.

    Evaluates nothing. Can only tell that *some* parenthesis is unmatched,
    not which one.
    '''

    def __init__(self, tokens):
        '''
        :param tokens: Token iterable, e.g. a Lexer. Read up to EOF.
        '''
        self.tokens = tokens

    def parse(self):
        '''
        Return the postfix token list.

        :raises MissingLeftParenthesis: on a ``)`` with no open ``(``.
        :raises MissingRightParenthesis: on a ``(`` never closed.
        '''
        queue = []
        stack = []
        for token in self.tokens:
            if token is EOF:
                break
            elif isinstance(token, Number):
                queue.append(token)
            elif isinstance(token, OperatorToken):
                while (stack and stack[-1] is not LPAREN and
                       precedence(stack[-1].kind,
                                  token.kind) is not Ordering.LESS):
                    queue.append(stack.pop())
                stack.append(token)
            elif token is LPAREN:
                stack.append(token)
            elif token is RPAREN:
                while stack and stack[-1] is not LPAREN:
                    queue.append(stack.pop())
                if not stack:
                    raise MissingLeftParenthesis()
                stack.pop()
            else:
                raise TypeError('Not a token: {!r}'.format(token))

        while stack:
            token = stack.pop()
            if token is LPAREN:
                raise MissingRightParenthesis()
            queue.append(token)

        logger.debug('postfix: %s', ' '.join(map(format_token, queue)))
        return queue


def format_token(token):
    '''
    Return the source text for a token.
    '''
    if isinstance(token, Number):
        return '{:g}'.format(token.value)
    elif isinstance(token, OperatorToken):
        return token.kind.value
    return token.value or '<eof>'


def parse(tokens):
    '''
    Return the postfix token list for an infix token iterable.
    '''
    return Parser(tokens).parse()

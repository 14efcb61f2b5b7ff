from collections import namedtuple
from enum import Enum
from functools import reduce
import logging
import operator

import regex

from .util import BadNumber, BadToken, wrap_user_errors


logger = logging.getLogger(__name__)


class Operator(Enum):
    '''
    Binary arithmetic operators, valued by their symbol.
    '''
    ADD = '+'
    SUB = '-'
    MULT = '*'
    DIV = '/'


class Marker(Enum):
    '''
    Tokens that carry no value.
    '''
    LPAREN = '('
    RPAREN = ')'
    EOF = ''

    def __repr__(self):
        return self.name


LPAREN = Marker.LPAREN
RPAREN = Marker.RPAREN
EOF = Marker.EOF


class Number(namedtuple('Number', ['value'])):
    __slots__ = ()

    def __repr__(self):
        return 'Number({!r})'.format(self.value)


class OperatorToken(namedtuple('OperatorToken', ['kind'])):
    __slots__ = ()

    def __repr__(self):
        return 'Operator({})'.format(self.kind.name)


ADD = OperatorToken(Operator.ADD)
SUB = OperatorToken(Operator.SUB)
MULT = OperatorToken(Operator.MULT)
DIV = OperatorToken(Operator.DIV)


@wrap_user_errors(BadNumber)
def _iconvert(lexeme):
    '''
    Convert a run of digits and dots to a float.

    1.2.3 and friends get this far; they are rejected here.
    '''
    return float(lexeme)


class Lexer:
    '''
    Pull lexer for infix arithmetic.

    One token per request, skipping whitespace. Single pass: lex the same
    text again with a fresh instance.
    '''
    # ASCII whitespace only. No \v, on purpose.
    SPACE = r'[\x20\t\n\f\r]*'
    # Digits and dots, contiguous. Not validated here; see _iconvert.
    NUMBER = r'[0-9][0-9.]*'
    OPERATOR = r'[' + ''.join(map(regex.escape,
                                  (o.value for o in Operator))) + r']'

    # All possible lexemes, one group each.
    LEXEME = regex.compile(r'(?<number>' + NUMBER + r')|'
                           r'(?<operator>' + OPERATOR + r')|'
                           r'(?<lparen>\()|'
                           r'(?<rparen>\))',
                           flags=reduce(operator.__or__,
                                        {regex.DOTALL, regex.VERSION0},
                                        0))
    WHITESPACE = regex.compile(SPACE)

    def __init__(self, text):
        self.input = text
        # Index of ch, and of the character after it.
        self.position = 0
        self.read_position = 0
        # Empty string once past the end.
        self.ch = ''
        self._read()

    def _read(self, n=1):
        '''
        Advance the cursor n characters.
        '''
        for _ in range(n):
            if self.read_position >= len(self.input):
                self.ch = ''
            else:
                self.ch = self.input[self.read_position]
            self.position = self.read_position
            self.read_position += 1

    def _skip_whitespace(self):
        match = self.WHITESPACE.match(self.input, self.position)
        self._read(len(match.group(0)))

    def next_token(self):
        '''
        Return the next token, advancing just past it.

        Returns EOF forever once the input is exhausted.

        :raises BadToken: on a character outside the grammar, after skipping
            it.
        '''
        self._skip_whitespace()
        if not self.ch:
            return EOF

        match = self.LEXEME.match(self.input, self.position)
        if match is None:
            bad = self.ch
            self._read()
            raise BadToken(bad)

        lexeme = match.group(0)
        self._read(len(lexeme))
        kind = match.lastgroup
        if kind == 'number':
            token = Number(_iconvert(lexeme))
        elif kind == 'operator':
            token = OperatorToken(Operator(lexeme))
        elif kind == 'lparen':
            token = LPAREN
        else:
            token = RPAREN
        logger.debug('lexed %r as %r', lexeme, token)
        return token

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is EOF:
            raise StopIteration
        return token


def tokenize(text):
    '''
    Return a fresh lexer (a token iterator) over text.
    '''
    return Lexer(text)

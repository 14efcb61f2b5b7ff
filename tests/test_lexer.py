'''
Lexer tests
'''

from infix.lexer import (Lexer, tokenize, Number, ADD, SUB, MULT, DIV,
                         LPAREN, RPAREN, EOF)
from infix.util import BadNumber, BadToken

from pytest import mark, raises


def test_operators():
    assert list(Lexer('1+2-3*4/5')) == [Number(1.), ADD, Number(2.), SUB,
                                        Number(3.), MULT, Number(4.), DIV,
                                        Number(5.)]


def test_float():
    assert list(tokenize('1.302+2.456')) == [Number(1.302), ADD,
                                             Number(2.456)]


def test_trailing_dot():
    assert list(tokenize('1.')) == [Number(1.)]


def test_parens():
    assert list(tokenize('(1)')) == [LPAREN, Number(1.), RPAREN]


def test_whitespace_skipped():
    assert list(tokenize(' 12 \t+\r\n( 3 )\f')) == [Number(12.), ADD, LPAREN,
                                                     Number(3.), RPAREN]


def test_number_consumed_in_one_call():
    l = Lexer('123.5+')
    assert l.next_token() == Number(123.5)
    assert l.next_token() == ADD
    assert l.next_token() is EOF


def test_eof_repeats():
    l = Lexer('')
    assert l.next_token() is EOF
    assert l.next_token() is EOF


@mark.parametrize('text, char', [
    ('excellent', 'e'),
    (';', ';'),
    ('.5', '.'),
    ('1 ^ 2', '^'),
    ('\v', '\v'),
    ('\N{DIGIT ONE}\N{ARABIC-INDIC DIGIT THREE}',
     '\N{ARABIC-INDIC DIGIT THREE}'),
])
def test_bad_token(text, char):
    with raises(BadToken) as info:
        list(tokenize(text))
    assert info.value.char == char


def test_bad_token_skipped():
    l = Lexer('a1')
    with raises(BadToken):
        l.next_token()
    assert l.next_token() == Number(1.)


def test_malformed_number():
    l = Lexer('1.2.3+4')
    with raises(BadNumber) as info:
        l.next_token()
    assert info.value.lexeme == '1.2.3'
    assert l.next_token() == ADD


def test_not_restartable():
    l = Lexer('1')
    assert list(l) == [Number(1.)]
    assert list(l) == []

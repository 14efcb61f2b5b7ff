'''
Shunting-Yard parser tests
'''

from infix.lexer import (tokenize, Number, Operator, ADD, SUB, MULT, DIV,
                         LPAREN, EOF)
from infix.parser import Ordering, Parser, parse, precedence, format_token
from infix.util import (BadToken, MissingLeftParenthesis,
                        MissingRightParenthesis)

from pytest import mark, raises


@mark.parametrize('text, expected', [
    ('1*2+3', [Number(1.), Number(2.), MULT, Number(3.), ADD]),
    ('1*(2+3)', [Number(1.), Number(2.), Number(3.), ADD, MULT]),
    ('12+45/8*9', [Number(12.), Number(45.), Number(8.), DIV, Number(9.),
                   MULT, ADD]),
    ('1-2-3', [Number(1.), Number(2.), SUB, Number(3.), SUB]),
    ('1-2+3', [Number(1.), Number(2.), SUB, Number(3.), ADD]),
    ('8/4*2', [Number(8.), Number(4.), DIV, Number(2.), MULT]),
    ('((1))', [Number(1.)]),
    ('', []),
])
def test_postfix(text, expected):
    assert parse(tokenize(text)) == expected


@mark.parametrize('text', [')', '1*2+3)', '(1))(', '1+)2('])
def test_missing_left_parenthesis(text):
    with raises(MissingLeftParenthesis):
        parse(tokenize(text))


@mark.parametrize('text', ['(', '1*(2+3', '((1)'])
def test_missing_right_parenthesis(text):
    with raises(MissingRightParenthesis):
        parse(tokenize(text))


def test_bad_token_propagates():
    with raises(BadToken) as info:
        parse(tokenize('excellent;1*(2+3'))
    assert info.value == BadToken('e')


def test_bad_token_after_valid_tokens():
    with raises(BadToken) as info:
        parse(tokenize('1 + 2 % 3'))
    assert info.value.char == '%'


def test_stops_at_eof():
    assert Parser([Number(1.), EOF, Number(2.)]).parse() == [Number(1.)]


def test_no_parens_in_output():
    postfix = parse(tokenize('(1+(2*3))/(4-5)'))
    assert LPAREN not in postfix
    assert len(postfix) == 9


def test_not_a_token():
    with raises(TypeError):
        parse(['1'])


@mark.parametrize('left, right, ordering', [
    (Operator.ADD, Operator.MULT, Ordering.LESS),
    (Operator.SUB, Operator.DIV, Ordering.LESS),
    (Operator.MULT, Operator.SUB, Ordering.GREATER),
    (Operator.DIV, Operator.ADD, Ordering.GREATER),
    (Operator.ADD, Operator.SUB, Ordering.EQUAL),
    (Operator.DIV, Operator.MULT, Ordering.EQUAL),
    (Operator.MULT, Operator.MULT, Ordering.EQUAL),
])
def test_precedence(left, right, ordering):
    assert precedence(left, right) is ordering


def test_format_token():
    assert ' '.join(map(format_token, parse(tokenize('1.5*(2+3)')))) == \
        '1.5 2 3 + *'

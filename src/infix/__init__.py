'''
Infix arithmetic calculator.

Evaluates plain four-function arithmetic with parentheses, such as
``12 + 45 / 8 * 9``. Three stages, each usable on its own:

- Lexer: text to tokens, one at a time.
- Parser: Shunting-Yard reordering of tokens into postfix (RPN) order.
- Evaluator: reduces the postfix sequence on a value stack.

No variables, no functions, no unary minus. Every number is a float.
'''

from .calc import alert, calc, evaluate_expression
from .cli import CLI
from .evaluator import Evaluator, evaluate
from .lexer import Lexer, tokenize
from .parser import Parser, parse


__all__ = ('Lexer', 'Parser', 'Evaluator', 'CLI',
           'tokenize', 'parse', 'evaluate',
           'evaluate_expression', 'calc', 'alert')

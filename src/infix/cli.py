from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .calc import evaluate_expression
from .lexer import Lexer
from .parser import Parser, format_token
from .util import EvaluationError, configure_logging


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = 'calc >> '

    def dumper(self):
        '''
        Dump the tokens and postfix order of each line.
        '''
        print('<tokens>\t<postfix>')
        for line in self.args.expressions:
            line = line.strip()
            try:
                tokens = list(Lexer(line))
                postfix = Parser(tokens).parse()
            except EvaluationError as e:
                print(repr(e))
                continue
            print(' '.join(map(format_token, tokens)),
                  ' '.join(map(format_token, postfix)),
                  sep='\t')

    def executor(self):
        '''
        Evaluate each line, printing the result or the error.
        '''
        for line in self.args.expressions:
            try:
                result = evaluate_expression(line.strip())
            # Never ends the session
            except EvaluationError as e:
                logger.debug('%r failed', line, exc_info=True)
                print(repr(e))
            else:
                print('{:.2f}'.format(result))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME.pattern)

    def _prompting_input(self):
        '''
        Return the interactive input, or plain stdin.

        Interactive if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix arithmetic calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        configure_logging(self.args.verbose)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)

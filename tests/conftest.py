from io import StringIO
import sys

from pytest import fixture

from infix.cli import CLI


@fixture
def cli():
    return CLI()


@fixture
def stdin(monkeypatch):
    '''
    Replace stdin with the lines given to the returned function.
    '''
    def feed(*lines):
        monkeypatch.setattr(sys, 'stdin', StringIO(''.join(line + '\n'
                                                           for line
                                                           in lines)))
    return feed

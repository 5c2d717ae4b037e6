from collections import deque

from .lexer import Lexer
from .registry import build_registry
from .util import CalcError, UnknownCommandError


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens and runs them: numeric literals are pushed, anything else is
    looked up in the command table.
    '''

    def __init__(self, registry=None, natural_order=False):
        '''
        Create empty stack machine.

        :param registry: Command table to share. Built if not given.
        :param natural_order: Passed on when building the command table. Can't
                              be combined with registry.
        '''
        if registry is not None and natural_order:
            raise ValueError('natural_order only applies to a built registry')
        if registry is None:
            registry = build_registry(natural_order=natural_order)
        self.registry = registry
        self.stack = deque()
        self.lexer = Lexer()

    def evaluate(self, token):
        '''
        Run a single token, returning the lines it outputs.
        '''
        number = self.lexer.parse(token)
        if number is not None:
            self.stack.append(number)
            return []
        try:
            operation = self.lookup(token)
        except CalcError as e:
            return [e.args[0]]
        return operation(self.stack)

    def lookup(self, token):
        '''
        Return the command named token.
        '''
        try:
            return self.registry[token]
        except KeyError:
            raise UnknownCommandError(token) from None

    def feed(self, line):
        '''
        Run every token on line, yielding output lines as they come.
        '''
        for token in self.lexer.lex(line):
            yield from self.evaluate(token)

    def arity(self, token):
        '''
        Return number of values token pops, or None if it's not a command.
        '''
        operation = self.registry.get(token)
        if operation is None:
            return None
        return int(operation.arity)

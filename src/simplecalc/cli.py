from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import format_number
from .machine import Machine
from .lexer import Lexer


BANNER = '''
Welcome to simplecalc, a Reverse Polish Notation (RPN) calculator!
For help, please use the 'help' command!
Use Ctrl+D to exit the calculator at any time.
'''
FAREWELL = '\ngoodbye!'


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Not persistent; nothing outlives a
                                    # session.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump every token's kind, repr, and arity.
        '''
        machine = Machine(natural_order=self.args.natural_order)
        lexer = Lexer()
        print('<kind>\t<repr(token)>\t<arity>')
        for line in self.args.expressions:
            for token in lexer.lex(line):
                if lexer.isnumber(token):
                    kind = 'number'
                elif token in machine.registry:
                    kind = 'command'
                else:
                    kind = 'unknown'
                print(kind, repr(token), machine.arity(token), sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        machine = Machine(natural_order=self.args.natural_order)
        framed = not self.args.oneshot
        if framed:
            print(BANNER)
        for line in self.args.expressions:
            for output in machine.feed(line):
                print(output)
            if self.args.verbose:
                self.printstack(machine)
        if framed:
            print(FAREWELL)

    def printstack(self, machine):
        '''
        Print all elements on the stack, top of the stack first, to stderr.
        '''
        if not machine.stack:
            return
        print(*map(format_number, reversed(machine.stack)),
              sep='\n', file=stderr)

    def raw_grammar(self):
        '''
        Print current internally defined numeric literal grammar.
        '''
        lexer = Lexer()
        print(lexer.NUMBER)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           stdin.isatty() and stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='print the stack to stderr '
                                               'after every line')
        self.argument_parser.add_argument('--natural-order',
                                          action='store_true',
                                          help='apply binary commands as '
                                               'second OP top')
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
        self.args.oneshot = self.args.expressions is not None
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)

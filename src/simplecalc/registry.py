'''
The built-in command table.

Every command maps to an Operation: a display name for error messages, an
arity, an effect on the stack, and a line of help text. The table is built
once and handed out read-only.
'''

from enum import IntEnum
from types import MappingProxyType
import math
import operator

from . import ieee
from .util import CalcError, StackSizeError, tobool, fromboolean, \
    format_number


class Arity(IntEnum):
    NULLARY = 0
    UNARY = 1
    BINARY = 2


class Operation:
    '''
    Registered command.

    Calling it checks the stack is deep enough, then runs the effect. Effects
    return a list of output lines. User errors come back as a single line,
    with the stack left as it was.
    '''

    def __init__(self, name, arity, effect, help):
        self.name = name
        self.arity = Arity(arity)
        self.effect = effect
        self.help = help

    def __repr__(self):
        return '{}({!r}, {})'.format(type(self).__name__, self.name,
                                     self.arity.name)

    def __call__(self, stack):
        try:
            if len(stack) < self.arity:
                raise StackSizeError(self.name, int(self.arity), len(stack))
            return self.effect(stack)
        except CalcError as e:
            return [e.args[0]]


def _unary(name, f, help):
    '''
    Operation popping one value and pushing f(value).
    '''
    def effect(stack):
        stack.append(f(stack.pop()))
        return []
    return Operation(name, Arity.UNARY, effect, help)


def _binary(name, f, help, natural=False):
    '''
    Operation popping two values and pushing f(first, second).

    first is the value that was on top. With natural, f is applied the other
    way around, so that "10 3 -" is 7.
    '''
    def effect(stack):
        first = stack.pop()
        second = stack.pop()
        if natural:
            first, second = second, first
        stack.append(f(first, second))
        return []
    return Operation(name, Arity.BINARY, effect, help)


def _predicate(f):
    def wrapped(*args):
        return fromboolean(f(*args))
    return wrapped


def _logical(f):
    def wrapped(*args):
        return fromboolean(f(*map(tobool, args)))
    return wrapped


def _print(stack):
    return [format_number(stack.pop())]


def _cp(stack):
    stack.append(stack[-1])
    return []


def _swap(stack):
    first = stack.pop()
    second = stack.pop()
    stack.append(first)
    stack.append(second)
    return []


def build_registry(natural_order=False):
    '''
    Build the command table.

    :param natural_order: Apply binary operations as second OP first, rather
                          than first OP second, first being the old top of
                          stack.
    '''
    def binary(name, f, help):
        return _binary(name, f, help, natural=natural_order)

    operations = {
        # Arithmetic
        '-': binary('Subtraction', operator.__sub__,
                    'Pops a, then b, pushes a - b'),
        '+': binary('Addition', operator.__add__,
                    'Pops a, then b, pushes a + b'),
        '*': binary('Multiplication', operator.__mul__,
                    'Pops a, then b, pushes a * b'),
        '/': binary('Division', ieee.divide,
                    'Pops a, then b, pushes a / b'),
        '^': binary('Power', ieee.power,
                    'Pops a, then b, pushes a to the power of b'),
        '*e^': binary('Scientific multiplication',
                      lambda a, b: a * ieee.power(10.0, b),
                      'Pops a, then b, pushes a * 10^b'),
        '/e^': binary('Scientific division',
                      lambda a, b: ieee.divide(a, ieee.power(10.0, b)),
                      'Pops a, then b, pushes a / 10^b'),
        'log': binary('Logarithm', ieee.logbase,
                      'Pops a, then b, pushes the logarithm of b in base a'),
        'ln': _unary('Natural logarithm', ieee.ln,
                     'Pops a, pushes the natural logarithm of a'),
        'lg': _unary('Binary logarithm', ieee.lg,
                     'Pops a, pushes the logarithm of a in base 2'),

        # Comparison
        '>': binary('Greater than', _predicate(operator.__gt__),
                    'Pops a, then b, pushes 1 if a > b, else 0'),
        '<': binary('Less than', _predicate(operator.__lt__),
                    'Pops a, then b, pushes 1 if a < b, else 0'),
        '==': binary('Equality', _predicate(operator.__eq__),
                     'Pops a, then b, pushes 1 if a == b, else 0'),

        # Logical; nonzero is true
        'nand': binary('Nand', _logical(lambda a, b: not (a and b)),
                       'Pops a, then b, pushes a nand b'),
        'and': binary('And', _logical(lambda a, b: a and b),
                      'Pops a, then b, pushes a and b'),
        'or': binary('Or', _logical(lambda a, b: a or b),
                     'Pops a, then b, pushes a or b'),
        'xor': binary('Xor', _logical(operator.__ne__),
                      'Pops a, then b, pushes a xor b'),
        'not': _unary('Not', _logical(operator.__not__),
                      'Pops a, pushes 1 if a is zero, else 0'),

        # Inspection of floating point values
        'inf?': _unary('Infinity check', _predicate(math.isinf),
                       'Pops a, pushes 1 if a is infinite, else 0'),
        'nan?': _unary('NaN check', _predicate(math.isnan),
                       'Pops a, pushes 1 if a is NaN, else 0'),
        'fin?': _unary('Finite check', _predicate(math.isfinite),
                       'Pops a, pushes 1 if a is neither infinite nor NaN, '
                       'else 0'),
        'sign': _unary('Sign', ieee.sign,
                       'Pops a, pushes 1 if a is positive, -1 if negative, '
                       'NaN if NaN'),

        # Stack
        'print': Operation('Print', Arity.UNARY, _print,
                           'Pops a and prints it'),
        'cp': Operation('Copy', Arity.UNARY, _cp,
                        'Pushes a copy of the top of the stack'),
        'swap': Operation('Swap', Arity.BINARY, _swap,
                          'Swaps the two values on top of the stack'),
    }

    def _help(stack):
        return ['{}\t{}'.format(name, operation.help)
                for name, operation
                in registry.items()]

    operations['help'] = Operation('Help', Arity.NULLARY, _help,
                                   'Prints this list of commands')
    registry = MappingProxyType(operations)
    return registry


__all__ = 'Arity', 'Operation', 'build_registry'

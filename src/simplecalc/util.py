from decimal import Decimal
import math


class CalcError(Exception):
    '''
    User-facing error. Reported as a line of output, never fatal.
    '''


class StackSizeError(CalcError):
    def __init__(self, name, required, current):
        if required == 1:
            message = "'{}' requires a non-empty stack".format(name)
        else:
            message = "'{}' requires stack size >= {}, current = {}".format(
                name, required, current)
        super().__init__(message)
        self.name = name
        self.required = required
        self.current = current


class UnknownCommandError(CalcError):
    def __init__(self, token):
        super().__init__("Unknown command '{}'".format(token))
        self.token = token


def tobool(number):
    '''
    Nonzero is true. NaN is nonzero.
    '''
    return number != 0.0


def fromboolean(flag):
    return 1.0 if flag else 0.0


def format_number(number):
    '''
    Shortest round-trip decimal form, never in scientific notation.

    Integral values lose their trailing ``.0``.
    '''
    if math.isnan(number):
        return 'NaN'
    elif math.isinf(number):
        return 'inf' if number > 0 else '-inf'
    text = repr(number)
    if 'e' in text:
        text = format(Decimal(text), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text

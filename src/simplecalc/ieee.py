'''
Floating point kernels with IEEE-754 results instead of Python exceptions.

Python raises on division by zero, on logarithms outside their domain, and on
overflowing powers. The calculator treats those results as data (inf, nan),
so that inf?, nan? and fin? have something to inspect.
'''

import math


def _isoddinteger(number):
    return math.isfinite(number) and \
        number == math.floor(number) and \
        math.fmod(number, 2.0) != 0.0


def divide(dividend, divisor):
    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def power(base, exponent):
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _isoddinteger(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Pole at zero, otherwise a negative base with a fractional exponent.
        if base == 0.0 and exponent < 0.0:
            if _isoddinteger(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def ln(number):
    if number == 0.0:
        return -math.inf
    elif number < 0.0:
        return math.nan
    return math.log(number)


def lg(number):
    if number == 0.0:
        return -math.inf
    elif number < 0.0:
        return math.nan
    return math.log2(number)


def logbase(base, number):
    '''
    Logarithm of number in the given base, as ln(number) / ln(base).
    '''
    return divide(ln(number), ln(base))


def sign(number):
    if math.isnan(number):
        return math.nan
    return math.copysign(1.0, number)

'''
Helper tests
'''

import math
import pytest

from simplecalc.util import format_number, tobool, fromboolean, \
    StackSizeError, UnknownCommandError


@pytest.mark.parametrize('number, text', [
    (5.0, '5'),
    (-7.0, '-7'),
    (0.5, '0.5'),
    (0.1, '0.1'),
    (1e20, '100000000000000000000'),
    (1e-7, '0.0000001'),
    (1.5e-7, '0.00000015'),
    (-0.0, '-0'),
    (math.nan, 'NaN'),
    (math.inf, 'inf'),
    (-math.inf, '-inf'),
])
def test_format_number(number, text):
    assert format_number(number) == text


def test_booleans():
    assert tobool(2.0)
    assert tobool(-0.5)
    assert tobool(math.nan)
    assert not tobool(0.0)
    assert not tobool(-0.0)
    assert fromboolean(True) == 1.0
    assert fromboolean(False) == 0.0


def test_messages():
    assert str(StackSizeError('Addition', 2, 1)) == \
        "'Addition' requires stack size >= 2, current = 1"
    assert str(StackSizeError('Print', 1, 0)) == \
        "'Print' requires a non-empty stack"
    assert str(UnknownCommandError('foo')) == "Unknown command 'foo'"

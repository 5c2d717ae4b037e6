'''
simplecalc, a Reverse Polish Notation (RPN) calculator.

Reads whitespace separated tokens, pushes numbers onto a stack of floats, and
runs named commands on it: arithmetic, logic, comparisons, a few stack
operators and floating point introspection. Type help at the prompt for the
list.

Binary commands apply to the top of the stack first: "10 3 -" is 3 - 10.
Pass --natural-order for the usual dc reading.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .registry import Operation, build_registry


__all__ = 'Machine', 'Lexer', 'CLI', 'Operation', 'build_registry'

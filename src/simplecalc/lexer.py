from functools import reduce
import operator

import regex


class Lexer:
    '''
    Lexer for the calculator's whitespace-separated token stream.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Plain decimal mantissa: 1, 1., 1.5 or .5
    MANTISSA = r'''
                (?:
                    [0-9]+
                    (?:
                        \.
                        [0-9]*
                    )?
                    |
                    \.
                    [0-9]+
                )
                '''
    # 1e10, 1E-3, 2.5e+7
    EXPONENT = r'''
                (?:
                    [eE]
                    [+-]?
                    [0-9]+
                )
                '''
    # inf, infinity and nan, any case.
    SPECIAL = r'''
               (?i:
                   inf(?:inity)?
                   |
                   nan
               )
               '''
    # Whole numeric literal, anchored at both ends of the token.
    NUMBER = r'''
              ^
              [+-]?
              (?:
                  {MANTISSA}
                  {EXPONENT}?
                  |
                  {SPECIAL}
              )
              \Z
              '''.format(MANTISSA=MANTISSA, EXPONENT=EXPONENT, SPECIAL=SPECIAL)
    TOKEN = r'\S+'

    # Default regex flags for matching literals
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield its tokens, in order.
        '''
        for match in regex.finditer(type(self).TOKEN, line):
            yield match.group(0)

    def isnumber(self, token):
        '''
        Return True if token is a numeric literal.
        '''
        return regex.match(type(self).NUMBER, token,
                           flags=type(self).FLAGS) is not None

    def parse(self, token):
        '''
        Return token's float value, or None if it's not a numeric literal.
        '''
        if not self.isnumber(token):
            return None
        return float(token)

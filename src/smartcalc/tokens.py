'''
Tokens exchanged between the lexer, converter and machine.
'''

from collections import namedtuple
from enum import Enum


class Kind(Enum):
    NUMBER = 'number'
    VARIABLE = 'x'
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'
    PLUS = '+'
    MINUS = '-'
    NEGATE = 'neg'
    MUL = '*'
    DIV = '/'
    MOD = 'mod'
    POWER = '^'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    ASIN = 'asin'
    ACOS = 'acos'
    ATAN = 'atan'
    SQRT = 'sqrt'
    LN = 'ln'
    LOG = 'log'


# Brackets carry 0, used only to stop popping at a scope boundary.
PRECEDENCE = {
    Kind.LEFT_PAREN: 0,
    Kind.RIGHT_PAREN: 0,
    Kind.PLUS: 1,
    Kind.MINUS: 1,
    Kind.MUL: 2,
    Kind.DIV: 2,
    Kind.MOD: 2,
    Kind.NEGATE: 3,
    Kind.POWER: 4,
    Kind.SIN: 5,
    Kind.COS: 5,
    Kind.TAN: 5,
    Kind.ASIN: 5,
    Kind.ACOS: 5,
    Kind.ATAN: 5,
    Kind.SQRT: 5,
    Kind.LN: 5,
    Kind.LOG: 5,
}

BINARY = frozenset({Kind.PLUS, Kind.MINUS, Kind.MUL, Kind.DIV, Kind.MOD,
                    Kind.POWER})
FUNCTIONS = frozenset({Kind.SIN, Kind.COS, Kind.TAN,
                       Kind.ASIN, Kind.ACOS, Kind.ATAN,
                       Kind.SQRT, Kind.LN, Kind.LOG})
# Pushed straight to output by the converter.
OPERANDS = frozenset({Kind.NUMBER, Kind.VARIABLE})
# Operators without a left operand.
PREFIX = FUNCTIONS | {Kind.NEGATE}
RIGHT_ASSOCIATIVE = frozenset({Kind.POWER})

# Spelling to kind, for everything the lexer reads as a name or symbol.
SPELLINGS = {kind.value: kind
             for kind
             in BINARY | FUNCTIONS | {Kind.LEFT_PAREN, Kind.RIGHT_PAREN,
                                      Kind.VARIABLE}}


class Token(namedtuple('Token', 'kind value precedence')):
    '''
    One lexeme: a number, an operator, a function or a bracket.

    value is only set for numbers.
    '''
    __slots__ = ()

    @classmethod
    def make(cls, kind, value=None):
        return cls(kind, value, PRECEDENCE.get(kind))

    @classmethod
    def number(cls, value):
        return cls.make(Kind.NUMBER, float(value))

    def __str__(self):
        if self.kind is Kind.NUMBER:
            return repr(self.value)
        return self.kind.value


def dump(tokens):
    '''
    Space-separated rendering of a token stream.
    '''
    return ' '.join(map(str, tokens))


def bind(tokens, x):
    '''
    Copy of tokens with every VARIABLE replaced by a number holding x.
    '''
    number = Token.number(x)
    return [number if token.kind is Kind.VARIABLE else token
            for token in tokens]

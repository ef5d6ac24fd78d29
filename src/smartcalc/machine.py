'''
Stack machine evaluating postfix token lists.
'''

from collections import deque
import logging
import math

from .tokens import Kind, BINARY
from .util import InputError, MathError, wrap_math_errors


logger = logging.getLogger(__name__)


def _divide(left, right):
    if right == 0:
        raise MathError('Division by zero')
    return left / right


def _modulo(left, right):
    if not (math.isfinite(left) and math.isfinite(right)):
        raise MathError('mod of non-finite operand')
    if right == 0:
        raise MathError('mod by zero')
    # C fmod: result takes the sign of the dividend.
    return math.fmod(left, right)


def _domain(f, name, valid):
    '''
    Wrap unary f, raising MathError outside the domain valid accepts.
    '''
    def wrapped(only):
        if not valid(only):
            raise MathError('{} undefined for {!r}'.format(name, only))
        return f(only)
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = name
    return wrapped


class Machine:
    '''
    Arithmetic stack machine.

    Takes postfix tokens and runs them. One operand stack, emptied at the
    start of each run.
    '''

    # Binary operators on the top two items of the stack, left operand
    # pushed first.
    BUILTINS = {
        Kind.PLUS: lambda left, right: left + right,
        Kind.MINUS: lambda left, right: left - right,
        Kind.MUL: lambda left, right: left * right,
        Kind.DIV: _divide,
        Kind.MOD: _modulo,
        # math.pow raises where ** would go complex.
        Kind.POWER: math.pow,
    }

    # Unary operators on the top of the stack. Angles in radians.
    MATH = {
        Kind.NEGATE: lambda only: -only,
        Kind.SIN: math.sin,
        Kind.COS: math.cos,
        Kind.TAN: math.tan,
        Kind.ASIN: _domain(math.asin, 'asin', lambda n: -1 <= n <= 1),
        Kind.ACOS: _domain(math.acos, 'acos', lambda n: -1 <= n <= 1),
        Kind.ATAN: math.atan,
        Kind.SQRT: _domain(math.sqrt, 'sqrt', lambda n: n >= 0),
        Kind.LN: _domain(math.log, 'ln', lambda n: n > 0),
        Kind.LOG: _domain(math.log10, 'log', lambda n: n > 0),
    }

    def __init__(self):
        self.stack = deque()

    def run(self, postfix):
        '''
        Evaluate postfix tokens and return the single remaining value.

        Stops at the first undefined operation with MathError.
        '''
        self.stack.clear()
        for token in postfix:
            self.feed(token)
        if len(self.stack) != 1:
            raise InputError('{} values left on stack'
                             .format(len(self.stack)))
        res = self.stack.pop()
        # A lone operand never went through _apply.
        if not math.isfinite(res):
            raise MathError('Result is {}'.format(res))
        return res

    def feed(self, token):
        '''
        Push a number, or apply an operator to the stack.
        '''
        if token.kind is Kind.NUMBER:
            self._pshstack(token.value)
        elif token.kind in BINARY:
            # Topmost is the right operand.
            right, left = self._popstack(2)
            self._pshstack(self._apply(token.kind, left, right))
        elif token.kind in type(self).MATH:
            self._pshstack(self._apply(token.kind, *self._popstack()))
        else:
            raise InputError('Cannot evaluate {}'.format(token))

    @wrap_math_errors('Cannot apply {1.value}')
    def _apply(self, kind, *args):
        '''
        Apply operator kind to args, checking the result is a real number.
        '''
        if kind in type(self).BUILTINS:
            f = type(self).BUILTINS[kind]
        else:
            f = type(self).MATH[kind]
        res = f(*args)
        if not math.isfinite(res):
            raise MathError('{} gave {}'.format(kind.value, res))
        return res

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise InputError('Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]


def evaluate_postfix(postfix):
    '''
    Evaluate postfix tokens on a fresh machine.
    '''
    res = Machine().run(postfix)
    logger.debug('result %r', res)
    return res

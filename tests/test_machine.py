'''
Stack machine tests
'''

import math

from pytest import approx, mark, raises

from smartcalc.converter import to_postfix
from smartcalc.lexer import Lexer
from smartcalc.machine import Machine, evaluate_postfix
from smartcalc.tokens import Kind, Token
from smartcalc.util import InputError, MathError


def run(text, x=0.0):
    return Machine().run(to_postfix(Lexer().tokenize(text, x)))


def test_operand_order():
    assert run('10-4') == 6
    assert run('8/2') == 4
    assert run('2^3') == 8
    assert run('7mod3') == 1


def test_mod_takes_sign_of_dividend():
    assert run('-7mod3') == -1
    assert run('7mod-3') == 1
    assert run('5.5mod2') == 1.5


def test_functions():
    assert run('log(1000)') == approx(3)
    assert run('ln(2)') == approx(math.log(2))
    assert run('sqrt(16)') == 4
    assert run('sin(0)+cos(0)+tan(0)') == 1
    assert run('asin(1)') == approx(math.pi / 2)
    assert run('acos(-1)') == approx(math.pi)
    assert run('atan(1)') == approx(math.pi / 4)


def test_division_by_zero():
    with raises(MathError, match='Division by zero'):
        run('1/0')
    with raises(MathError):
        run('1/(x-1)', 1)


def test_mod_by_zero():
    with raises(MathError, match='mod by zero'):
        run('5mod0')


@mark.parametrize('text', [
    'sqrt(-1)',
    'ln(0)',
    'ln(-1)',
    'log(0)',
    'log(-10)',
    'asin(2)',
    'asin(-1.5)',
    'acos(2)',
    'acos(-1.01)',
])
def test_domain(text):
    with raises(MathError, match='undefined'):
        run(text)


@mark.parametrize('text', ['10^400', '(-8)^(1/3)', '0^-1',
                           '10^300*10^300'])
def test_not_real(text):
    with raises(MathError):
        run(text)


def test_stops_at_first_error():
    machine = Machine()
    with raises(MathError):
        machine.run(to_postfix(Lexer().tokenize('sqrt(-1)+1/0')))
    # 1/0 never got its operands pushed.
    assert list(machine.stack) == []


def test_stack_reset_between_runs():
    machine = Machine()
    assert machine.run([Token.number(1)]) == 1
    assert machine.run([Token.number(2)]) == 2


def test_malformed_postfix():
    with raises(InputError, match='Less than 2'):
        Machine().run([Token.number(1), Token.make(Kind.PLUS)])
    with raises(InputError, match='2 values left'):
        Machine().run([Token.number(1), Token.number(2)])
    with raises(InputError, match='Cannot evaluate'):
        Machine().run([Token.make(Kind.LEFT_PAREN)])


def test_evaluate_postfix():
    assert evaluate_postfix([Token.number(2), Token.number(3),
                             Token.make(Kind.POWER)]) == 8


def test_lone_operand_must_be_finite():
    with raises(MathError, match='Result is inf'):
        Machine().run([Token.number(float('inf'))])
    with raises(MathError, match='Result is nan'):
        Machine().run([Token.number(float('nan'))])


def test_unbound_variable():
    with raises(InputError, match='Cannot evaluate x'):
        Machine().run([Token.make(Kind.VARIABLE)])

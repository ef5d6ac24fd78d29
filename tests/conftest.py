from pytest import fixture

from smartcalc.calculator import Calculator
from smartcalc.graph import Graph
from smartcalc.lexer import Lexer
from smartcalc.validator import Validator


@fixture
def validator() -> Validator:
    return Validator()


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def calculator() -> Calculator:
    '''
    Fresh calculator, x bound to 0.
    '''
    return Calculator()


@fixture
def graph() -> Graph:
    return Graph()

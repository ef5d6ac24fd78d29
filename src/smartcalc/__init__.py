'''
Single-variable expression calculator.

Evaluates infix text such as 2x^2 - sin(x)/3 with numbers, the variable x,
+ - * / mod ^, unary minus and sin cos tan asin acos atan sqrt ln log.
The text is validated, tokenized, converted to RPN (shunting-yard) and run on
a stack machine. evaluate() gives Success(value) or a Failure classified as
an input error (malformed text) or a math error (undefined operation, like
division by zero or sqrt of a negative number).

Built on top of that:

- Calculator, rendering results like the calculator display does.
- Graph, sampling an expression across an x axis range.
- CLI, the smartcalc command.
'''

from .calculator import Calculator
from .cli import CLI
from .engine import evaluate, evaluate_many, Status, Success, Failure
from .graph import Graph
from .lexer import Lexer
from .machine import Machine
from .util import CalcError, InputError, MathError
from .validator import Validator


__all__ = ('evaluate', 'evaluate_many', 'Status', 'Success', 'Failure',
           'Calculator', 'Graph', 'CLI', 'Lexer', 'Machine', 'Validator',
           'CalcError', 'InputError', 'MathError')

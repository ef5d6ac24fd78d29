'''
Expression evaluation: validator, lexer, converter and machine in a row.
'''

from collections import namedtuple
from enum import Enum
import logging

from .converter import to_postfix
from .lexer import Lexer
from .machine import evaluate_postfix
from .tokens import bind
from .util import InputError, MathError
from .validator import Validator


logger = logging.getLogger(__name__)


class Status(Enum):
    SUCCESS = 'success'
    MATH_ERROR = 'math error'
    INPUT_ERROR = 'input error'


class Success(namedtuple('Success', 'value')):
    '''
    Evaluation result carrying the computed float.
    '''
    __slots__ = ()
    status = Status.SUCCESS


class Failure(namedtuple('Failure', 'status reason')):
    '''
    Evaluation failed. Has no value to read by mistake.
    '''
    __slots__ = ()


def _run(text, x):
    return evaluate_postfix(to_postfix(Lexer().tokenize(text, x)))


def evaluate(expression, x=0.0):
    '''
    Evaluate expression text with the variable bound to x.

    Returns Success(value), or Failure with Status.INPUT_ERROR when the text
    is malformed and Status.MATH_ERROR when an operation is undefined.
    '''
    validator = Validator()
    if not validator.validate(expression):
        return Failure(Status.INPUT_ERROR, 'Invalid expression')
    try:
        return Success(_run(validator.trim(expression), x))
    except MathError as e:
        logger.debug('%r at x=%r: %s', expression, x, e.args[0])
        return Failure(Status.MATH_ERROR, e.args[0])
    except InputError as e:
        return Failure(Status.INPUT_ERROR, e.args[0])


def evaluate_many(expression, xs):
    '''
    Evaluate expression at each x, returning (x, y) for the defined points.

    Points where the math is undefined are left out. Malformed text raises
    InputError instead: there would be no points at all.
    '''
    validator = Validator()
    if not validator.validate(expression):
        raise InputError('Invalid expression {!r}'.format(expression))
    # x only changes number tokens, so lex and reorder once.
    postfix = to_postfix(Lexer().tokenize(validator.trim(expression), None))
    points = []
    for x in xs:
        try:
            points.append((x, evaluate_postfix(bind(postfix, x))))
        except MathError as e:
            logger.debug('skipping x=%r: %s', x, e.args[0])
    return points

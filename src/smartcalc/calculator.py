'''
Calculator front end: holds x and renders results as text.
'''

import logging

from .engine import evaluate, Status
from .validator import Validator


logger = logging.getLogger(__name__)


class Calculator:
    '''
    What the calculator display shows for a typed expression.
    '''

    PRECISION = 8

    EMPTY = 'Empty input'
    TOO_LARGE = 'Too large input'
    MESSAGES = {
        Status.MATH_ERROR: 'Error in calculation',
        Status.INPUT_ERROR: 'Error in input',
    }

    def __init__(self, x=0.0):
        self.x = x
        self.validator = Validator()

    def _oversized(self, text):
        return len(text) > self.validator.MAX_LENGTH

    def calculate(self, text):
        '''
        Evaluate text at the current x and return the display string.
        '''
        if not text:
            return type(self).EMPTY
        if self._oversized(text):
            return type(self).TOO_LARGE
        outcome = evaluate(text, self.x)
        if outcome.status is not Status.SUCCESS:
            return type(self).MESSAGES[outcome.status]
        return self.format(outcome.value)

    def format(self, value):
        '''
        Fixed point, PRECISION digits. Never shows -0.
        '''
        res = '{:.{}f}'.format(value, type(self).PRECISION)
        if res.startswith('-') and not res.strip('-0.'):
            res = res[1:]
        return res

    def set_x(self, text, previous):
        '''
        Bind x to the number in text, returning what the x label should read.

        Invalid text leaves x alone and gives back previous.
        '''
        if not text or self._oversized(text):
            return previous
        if not self.validator.validate_number(text):
            logger.debug('ignoring x=%r', text)
            return previous
        self.x = float(text.strip())
        return text

'''
Grapher model: axis ranges, sampling step and the sampled points.
'''

import logging

import regex

from .engine import evaluate_many
from .validator import Validator


logger = logging.getLogger(__name__)


class Graph:
    '''
    Samples an expression over the x axis for plotting.

    check() and set_axis() must both pass before calculate() samples
    anything.
    '''

    MAX_AXIS_LENGTH = 9
    AXIS_LIMIT = 1000000
    DEFAULT_AXIS = (-10, 10)
    # (minimal span, step), widest span first.
    STEPS = (
        (200000, 8),
        (100000, 4),
        (10000, 2),
        (200, 1),
        (20, 0.1),
        (1, 0.01),
    )

    EMPTY = 'Empty input'
    TOO_LARGE = 'Too large input'
    INCORRECT = 'Incorrect input'
    INVALID_AXIS = 'Invalid cords'

    def __init__(self):
        self.validator = Validator()
        self.allowed = False
        self.x_min, self.x_max = type(self).DEFAULT_AXIS
        self.y_min, self.y_max = type(self).DEFAULT_AXIS
        self.points = []

    def check(self, text):
        '''
        Return '' and allow sampling if text is a valid expression.

        Otherwise return the message to show.
        '''
        self.allowed = False
        if not text:
            return type(self).EMPTY
        if len(text) > self.validator.MAX_LENGTH:
            return type(self).TOO_LARGE
        if not self.validator.validate(text):
            return type(self).INCORRECT
        self.allowed = True
        return ''

    def _valid_bound(self, text):
        return 0 < len(text) <= type(self).MAX_AXIS_LENGTH and \
            regex.fullmatch(r'[-+]?\d+', text) is not None

    def _valid_range(self, low, high):
        limit = type(self).AXIS_LIMIT
        return low < high and -limit <= low and high <= limit

    def set_axis(self, previous, x_min, x_max, y_min, y_max):
        '''
        Take axis bounds as text, returning the message to show.

        Keeps previous when all bounds are valid integers in range.
        '''
        bounds = x_min, x_max, y_min, y_max
        if all(map(self._valid_bound, bounds)):
            x_min, x_max, y_min, y_max = map(int, bounds)
            if self._valid_range(x_min, x_max) and \
               self._valid_range(y_min, y_max):
                self.x_min, self.x_max = x_min, x_max
                self.y_min, self.y_max = y_min, y_max
                return previous
        logger.debug('invalid axis %r', bounds)
        self.allowed = False
        return type(self).INVALID_AXIS

    def step(self, span):
        '''
        Sampling step for an x axis span.
        '''
        for minimum, step in type(self).STEPS:
            if span >= minimum:
                return step
        raise ValueError('Span {} too small to sample'.format(span))

    def samples(self):
        '''
        Sample x values from x_min up to, excluding, x_max.
        '''
        step = self.step(self.x_max - self.x_min)
        count = 0
        xs = []
        while self.x_min + count * step < self.x_max:
            xs.append(self.x_min + count * step)
            count += 1
        return xs

    def calculate(self, text):
        '''
        Replace points with text sampled over the x axis, if allowed.
        '''
        self.points = []
        if not self.allowed:
            return self.points
        xs = self.samples()
        self.points = evaluate_many(text, xs)
        logger.debug('%d of %d points defined for %r', len(self.points),
                     len(xs), text)
        return self.points

'''
Syntax checks run on raw expression text before it is tokenized.
'''

import logging

import regex

from .lexer import Lexer
from .tokens import Kind, SPELLINGS, BINARY, FUNCTIONS
from .util import InputError


logger = logging.getLogger(__name__)


# Lexeme classes for the adjacency table.
START = 'start'
END = 'end'
NUMBER = 'number'
VARIABLE = 'variable'
FUNCTION = 'function'
BINARY_OPERATOR = 'binary'
MINUS = 'minus'
LEFT = 'left'
RIGHT = 'right'

# What may start an operand: minus here is unary.
OPERAND_START = frozenset({NUMBER, VARIABLE, FUNCTION, LEFT, MINUS})
# What may follow a complete operand. LEFT, FUNCTION and VARIABLE are
# implicit multiplication (2(1), 2sin(1), 2x).
AFTER_OPERAND = frozenset({BINARY_OPERATOR, MINUS, RIGHT, END,
                           LEFT, FUNCTION, VARIABLE})

FOLLOWS = {
    START: OPERAND_START,
    BINARY_OPERATOR: OPERAND_START,
    MINUS: OPERAND_START,
    LEFT: OPERAND_START,
    FUNCTION: frozenset({LEFT}),
    NUMBER: AFTER_OPERAND,
    VARIABLE: AFTER_OPERAND,
    # (1)2
    RIGHT: AFTER_OPERAND | {NUMBER},
}


class Validator:
    '''
    Accepts or rejects expression text.

    Nothing here raises on bad input; validate() just says no.
    '''
    MAX_LENGTH = 256
    # Maximal run of characters that could belong to one number.
    DIGITS = r'[0-9.]+'

    def __init__(self):
        self.lexer = Lexer()

    def trim(self, text):
        '''
        Strip all whitespace.
        '''
        return regex.sub(r'\s+', '', text)

    def validate(self, raw_text):
        '''
        Return True if raw_text is a well-formed expression.
        '''
        if not raw_text or len(raw_text) > type(self).MAX_LENGTH:
            logger.debug('rejected %d characters on length',
                         len(raw_text or ''))
            return False
        if not self.trim(raw_text):
            return False
        try:
            classes = [self._classify(match)
                       for match in self.lexer.lex(raw_text)
                       if self.lexer.isfeedable(match)]
        except InputError as e:
            logger.debug('rejected %r: %s', raw_text, e.args[0])
            return False
        checks = (self._valid_numbers(raw_text),
                  self._valid_brackets(classes),
                  self._valid_adjacency(classes))
        if not all(checks):
            logger.debug('rejected %r', raw_text)
            return False
        return True

    def validate_number(self, text):
        '''
        Return True if text is one number, optionally negative.
        '''
        return regex.fullmatch(r'-?(?:' + Lexer.NUMBER + r')',
                               text.strip(),
                               flags=Lexer.FLAGS) is not None

    def _classify(self, match):
        groups = self.lexer.matchedgroups(match)
        if 'number' in groups:
            return NUMBER
        text = groups.get('name') or groups.get('operator') or \
            groups.get('bracket')
        kind = SPELLINGS[text]
        if kind is Kind.VARIABLE:
            return VARIABLE
        if kind is Kind.MINUS:
            return MINUS
        if kind in BINARY:
            return BINARY_OPERATOR
        if kind in FUNCTIONS:
            return FUNCTION
        if kind is Kind.LEFT_PAREN:
            return LEFT
        return RIGHT

    def _valid_numbers(self, text):
        '''
        At most one dot per number, and a dot alone is no number.
        '''
        return all(run.count('.') <= 1 and run != '.'
                   for run in regex.findall(type(self).DIGITS, text))

    def _valid_brackets(self, classes):
        depth = 0
        for index, class_ in enumerate(classes):
            if class_ == FUNCTION and \
               (index + 1 == len(classes) or classes[index + 1] != LEFT):
                return False
            if class_ == LEFT:
                depth += 1
            elif class_ == RIGHT:
                depth -= 1
                if depth < 0:
                    return False
        return depth == 0

    def _valid_adjacency(self, classes):
        sequence = [START] + classes + [END]
        return all(current in FOLLOWS[previous]
                   for previous, current
                   in zip(sequence, sequence[1:]))

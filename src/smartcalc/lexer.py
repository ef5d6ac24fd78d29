from functools import reduce
import logging
import operator

import regex

from .tokens import Kind, Token, SPELLINGS, BINARY, FUNCTIONS, dump
from .util import InputError


logger = logging.getLogger(__name__)

# Around an implicit multiplication: the left side ends an operand, the
# right side starts one.
OPERAND_END = frozenset({Kind.NUMBER, Kind.VARIABLE, Kind.RIGHT_PAREN})
OPERAND_START = frozenset({Kind.NUMBER, Kind.VARIABLE, Kind.LEFT_PAREN})


class Lexer:
    '''
    Lexer for the infix expression grammar.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Number, of any kind supported by grammar. No sign, no exponent; a
    # leading minus is an operator.
    NUMBER = r'''
              (?:
                  # 1, 12, 12. (notice trailing dot), 1.3
                  [0-9]+
                  (?:
                      \.
                      [0-9]*
                  )?
              )|(?:
                  # .2
                  \.
                  [0-9]+
              )
              '''
    # Longest spelling first. POSIX matching picks the longest anyway, but
    # asin must never lex as a followed by sin.
    NAME = r'(?:' + r'|'.join(sorted((regex.escape(spelling)
                                       for spelling in SPELLINGS
                                       if spelling.isalpha()),
                                      key=len, reverse=True)) + r')'
    OPERATOR = r'(?:' + r'|'.join(regex.escape(spelling)
                                  for spelling in SPELLINGS
                                  if len(spelling) == 1 and
                                  not spelling.isalpha() and
                                  spelling not in '()') + r')'
    BRACKET = r'[()]'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<name>' + NAME + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<bracket>' + BRACKET + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes.

        Raises InputError at the first character that starts no lexeme.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise InputError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme becomes a token (i.e., is not whitespace).
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the lexeme's matched groups.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def parse(self, groups, x=0.0):
        '''
        Turn one lexeme's groups into a Token, substituting x.

        With x None the variable stays a VARIABLE token, for binding later.
        '''
        if 'number' in groups:
            return Token.number(groups['number'])
        text = groups.get('name') or groups.get('operator') or \
            groups.get('bracket')
        kind = SPELLINGS[text]
        if kind is Kind.VARIABLE and x is not None:
            return Token.number(x)
        return Token.make(kind)

    def tokenize(self, text, x=0.0):
        '''
        Convert validated text to a list of tokens.

        The variable is replaced by a number holding x. Unary minus becomes
        NEGATE, and a MUL is inserted wherever two operands sit side by side
        (2x, 2(1), (1)(2), xsin(1)).
        '''
        tokens = []
        for match in self.lex(text):
            if not self.isfeedable(match):
                continue
            token = self.parse(self.matchedgroups(match), x)
            previous = tokens[-1] if tokens else None
            if token.kind is Kind.MINUS and self._expects_operand(previous):
                token = Token.make(Kind.NEGATE)
            elif self._implies_multiplication(previous, token):
                tokens.append(Token.make(Kind.MUL))
            tokens.append(token)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('tokens %r -> %s', text, dump(tokens))
        return tokens

    @staticmethod
    def _expects_operand(previous):
        return previous is None or \
            previous.kind in BINARY or \
            previous.kind in {Kind.LEFT_PAREN, Kind.NEGATE}

    @staticmethod
    def _implies_multiplication(previous, token):
        if previous is None:
            return False
        if previous.kind not in OPERAND_END:
            return False
        return token.kind in FUNCTIONS or \
            token.kind in OPERAND_START

'''
Infix to postfix (RPN) conversion, shunting-yard style.
'''

import logging

from .tokens import Kind, OPERANDS, PREFIX, RIGHT_ASSOCIATIVE, dump


logger = logging.getLogger(__name__)


def _pops(top, incoming):
    '''
    Return True if the stack top must be output before pushing incoming.
    '''
    if top.kind is Kind.LEFT_PAREN:
        return False
    if top.precedence == incoming.precedence and \
       incoming.kind in RIGHT_ASSOCIATIVE:
        return False
    return top.precedence >= incoming.precedence


def to_postfix(tokens):
    '''
    Reorder an infix token list into postfix order.

    Brackets must be balanced; the validator guarantees that.
    '''
    output = []
    stack = []
    for token in tokens:
        if token.kind in OPERANDS:
            output.append(token)
        elif token.kind is Kind.LEFT_PAREN:
            stack.append(token)
        elif token.kind is Kind.RIGHT_PAREN:
            while stack[-1].kind is not Kind.LEFT_PAREN:
                output.append(stack.pop())
            stack.pop()
        elif token.kind in PREFIX:
            # Nothing to its left to bind to, so nothing to pop.
            stack.append(token)
        else:
            while stack and _pops(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
    while stack:
        token = stack.pop()
        assert token.kind is not Kind.LEFT_PAREN, 'unbalanced brackets'
        output.append(token)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('postfix %s', dump(output))
    return output

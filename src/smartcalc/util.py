from functools import wraps


class CalcError(Exception):
    pass


class InputError(CalcError):
    '''
    Expression text is malformed: bad grammar, brackets or characters.
    '''


class MathError(CalcError):
    '''
    Well-formed expression hit an undefined numeric operation.
    '''


def wrap_math_errors(fmt):
    '''
    Decorator that converts numeric exceptions to MathErrors.

    Passes through CalcErrors. fmt is formatted with the wrapped call's
    arguments, so {1} is the first argument after self.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise MathError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator

'''
Validator tests
'''

from pytest import mark


VALID = [
    '1 + 2 -   3',
    '1-2*12-3^2',
    'sin(12)-3',
    'ln(12)^3-1*(-12+5)',
    '(cos((-5)))+ln((10/(5*7))^2)-(tan(sin(-3mod2))-5mod3*4/5/7)',
    'x',
    '-x',
    '--3',
    '2*-3',
    '2--3',
    '1.',
    '.5',
    '3mod2',
    'x mod x',
    'sin (1)',
    'asin(1)+acos(0)+atan(1)+sqrt(4)+log(10)',
    # Implicit multiplication
    '2x',
    'xx',
    '2(1+x)',
    'x(1)',
    '2sin(x)',
    'xsin(x)',
    '(1)(2)',
    '(1)2',
    '(1)x',
    '(1)sin(1)',
]

INVALID = [
    '',
    '   ',
    '(()',
    '())',
    ')(',
    '()',
    '1+',
    '+1',
    '*2',
    '(+1)',
    '1+*2',
    'mod 2',
    '2^',
    '1 2',
    'x2',
    '2 .5',
    '1.2.3',
    '.',
    '1..',
    'sin',
    'sin1',
    'sin x',
    'sin()',
    'abc',
    's in(1)',
    '1,5',
    '2**3',
    # Digits other than 0-9
    '١+1',
    '2١',
    'x' * 257,
]


@mark.parametrize('text', VALID)
def test_valid(validator, text):
    assert validator.validate(text)


@mark.parametrize('text', INVALID)
def test_invalid(validator, text):
    assert not validator.validate(text)


def test_max_length(validator):
    assert validator.validate('x' * validator.MAX_LENGTH)
    assert not validator.validate('x' * (validator.MAX_LENGTH + 1))


def test_trim(validator):
    assert validator.trim(' 1 +\t2 -   3 ') == '1+2-3'


@mark.parametrize('text', ['1', '-2', ' 3 ', '.5', '-.5', '1.', '12.25'])
def test_valid_number(validator, text):
    assert validator.validate_number(text)


@mark.parametrize('text', ['', '-', '--1', '1-', 'x', '1.2.3', '- 1', '1 2',
                           '+1', '.'])
def test_invalid_number(validator, text):
    assert not validator.validate_number(text)

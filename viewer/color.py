'''
Hexadecimal color strings: parsing and random generation.
'''

import random
import string
import time
from collections import namedtuple

Color = namedtuple('Color', 'red green blue alpha')
ColorEntry = namedtuple('ColorEntry', 'color text')

OPAQUE = 0xff

SHORTHAND_LEN = 3
FULL_LEN = 6

HEX_DIGITS = '0123456789abcdef'

_rng = random.Random(time.time_ns())

class ColorError(ValueError):
    def __init__(self, text, reason):
        super().__init__(reason)
        self.text = text
        self.reason = reason

class BadLength(ColorError):
    def __init__(self, text):
        super().__init__(text, 'expected 3 or 6 hexadecimal digits')

class InvalidChar(ColorError):
    def __init__(self, text, char):
        super().__init__(text, f'{char!r} is not a hexadecimal digit')
        self.char = char

def parse_color(s):
    '''
    Parse "[#]RGB" or "[#]RRGGBB" into an opaque Color.

    In the 3 digit form each digit is duplicated to fill its channel, so "f"
    gives 0xff and not 0xf0.
    '''

    digits = s[1:] if s.startswith('#') else s

    if len(digits) not in (SHORTHAND_LEN, FULL_LEN):
        raise BadLength(s)

    for c in digits:
        if c not in string.hexdigits:
            raise InvalidChar(s, c)

    values = [ int(c, 16) for c in digits ]
    if len(values) == SHORTHAND_LEN:
        red, green, blue = [ v * 16 + v for v in values ]
    else:
        red, green, blue = [ values[i] * 16 + values[i + 1] for i in range(0, FULL_LEN, 2) ]

    return Color(red, green, blue, OPAQUE)

def parse_colors(strings):
    '''Parse every string in order. The first invalid one raises.'''

    return tuple(ColorEntry(parse_color(s), s) for s in strings)

def seed_random(seed):
    _rng.seed(seed)

def random_color(rng=None):
    rng = rng or _rng
    return '#' + ''.join(rng.choice(HEX_DIGITS) for _ in range(FULL_LEN))

def random_colors(amount, rng=None):
    return [ random_color(rng) for _ in range(amount) ]

def to_hex(color):
    return '#%02x%02x%02x' % (color.red, color.green, color.blue)

from .arith import add, add_at_offset, compare, shift, sub_at_offset, subtract
from .balance import multiply_balance
from .basic import Magnitude
from .errors import BigNumError, InvariantError
from .karatsuba import KARATSUBA_THRESHOLD, multiply_karatsuba
from .normal import multiply_normal
from .radix import DEFAULT_BITS, DEFAULT_RADIX, Radix, from_digits, pad, to_digits, trim
from .strategy import (BALANCE, KARATSUBA, MULTIPLIERS, NORMAL, Multiplier, SelectionPolicy,
                       cross_check, get_multiplier, multiply, multiply_int)

__version__ = "0.1.0"

from typing import List, Sequence

from .arith import add_at_offset
from .radix import DEFAULT_RADIX, Radix


def multiply_normal(x: Sequence[int], y: Sequence[int], radix: Radix = DEFAULT_RADIX) -> List[int]:
    """Schoolbook product of two magnitudes, ``len(x) + len(y)`` digits long."""
    n, m = len(x), len(y)
    z = [0] * (n + m)
    bits, mask = radix.bits, radix.mask

    for i in range(n):
        xi = x[i]
        carry = 0
        for j in range(m):
            t = xi * y[j] + z[i + j] + carry
            z[i + j] = t & mask
            carry = t >> bits
        if carry:
            add_at_offset(z, [carry], i + m, radix, grow=False)

    return z

import logging
from typing import List, Sequence

from .arith import add, add_at_offset, sub_at_offset
from .balance import MulFunc, multiply_balance
from .normal import multiply_normal
from .radix import DEFAULT_RADIX, Radix, pad

logger = logging.getLogger(__name__)

KARATSUBA_THRESHOLD = 70


def multiply_karatsuba(x: Sequence[int], y: Sequence[int], radix: Radix = DEFAULT_RADIX,
                       threshold: int = KARATSUBA_THRESHOLD) -> List[int]:
    """
    Karatsuba product of two magnitudes, ``len(x) + len(y)`` digits long.

    The top level always splits once when both operands have at least two
    digits. Below that, sub-products whose shorter operand has at most
    ``threshold`` digits are handed to ``multiply_normal``.
    """
    if threshold < 1:
        raise ValueError(f"karatsuba threshold must be at least 1, got {threshold}")
    return _karatsuba(x, y, radix, threshold, 0, 1)


def _karatsuba(x: Sequence[int], y: Sequence[int], radix: Radix, threshold: int,
               depth: int, cutoff: int) -> List[int]:
    if len(x) > len(y):
        x, y = y, x
    n, m = len(x), len(y)

    if n == 0:
        return [0] * m
    if n <= cutoff:
        return multiply_normal(x, y, radix)

    def sub(a: Sequence[int], b: Sequence[int], r: Radix) -> List[int]:
        return _karatsuba(a, b, r, threshold, depth + 1, threshold)

    if 2 * n <= m:
        return multiply_balance(x, y, radix, mul=sub)

    k = (m + 1) // 2
    x0, x1 = pad(x[:k], k), list(x[k:])
    y0, y1 = pad(y[:k], k), list(y[k:])
    logger.debug("karatsuba depth %d: %d x %d digits, split at %d (high halves %d, %d)",
                 depth, n, m, k, len(x1), len(y1))

    z0 = sub(x0, y0, radix)
    z2 = sub(x1, y1, radix)
    z1 = _cross_term(x0, x1, y0, y1, z0, z2, k, radix, sub)

    z = [0] * (n + m)
    add_at_offset(z, z0, 0, radix, grow=False)
    add_at_offset(z, z1, k, radix, grow=False)
    add_at_offset(z, z2, 2 * k, radix, grow=False)
    return z


def _cross_term(x0: List[int], x1: List[int], y0: List[int], y1: List[int],
                z0: List[int], z2: List[int], k: int, radix: Radix, sub: MulFunc) -> List[int]:
    """``(x0 + x1)(y0 + y1) - z0 - z2``, i.e. ``x0*y1 + x1*y0``."""
    sx, cx = add(x0, x1, radix)
    sy, cy = add(y0, y1, radix)

    # (sx + cx*B^k)(sy + cy*B^k) < 4*B^2k fits in 2k + 2 digits for any B >= 2
    z1 = sub(sx, sy, radix) + [0, 0]
    if cx:
        add_at_offset(z1, sy, k, radix, grow=False)
    if cy:
        add_at_offset(z1, sx, k, radix, grow=False)
    if cx and cy:
        add_at_offset(z1, [1], 2 * k, radix, grow=False)

    sub_at_offset(z1, z0, 0, radix)
    sub_at_offset(z1, z2, 0, radix)
    return z1

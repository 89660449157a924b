import logging
from typing import Callable, List, Optional, Sequence

from .arith import add_at_offset
from .normal import multiply_normal
from .radix import DEFAULT_RADIX, Radix

logger = logging.getLogger(__name__)

MulFunc = Callable[[Sequence[int], Sequence[int], Radix], List[int]]


def multiply_balance(x: Sequence[int], y: Sequence[int], radix: Radix = DEFAULT_RADIX,
                     mul: Optional[MulFunc] = None) -> List[int]:
    """
    Multiplies operands of very different lengths.

    The longer operand is cut into chunks no longer than the shorter one;
    each chunk is multiplied with ``mul`` and added into the product at the
    chunk's digit offset.

    Args:
        x, y: Magnitudes, least significant digit first.
        radix: Digit width of both operands.
        mul: Chunk multiplier, ``multiply_normal`` when omitted.

    Returns:
        A new list of ``len(x) + len(y)`` digits.
    """
    if mul is None:
        mul = multiply_normal

    short, long = (x, y) if len(x) <= len(y) else (y, x)
    s, l = len(short), len(long)
    if s == 0:
        return [0] * l
    if l <= s:
        return mul(x, y, radix)

    z = [0] * (l + s)
    chunks = 0
    for start in range(0, l, s):
        part = mul(short, long[start:start + s], radix)
        add_at_offset(z, part, start, radix, grow=False)
        chunks += 1

    logger.debug("balance: %d x %d digits in %d chunks", s, l, chunks)
    return z

"""
Carry and borrow aware digit-array arithmetic shared by the multipliers.

Every helper walks digit positions from least to most significant. The
helpers returning a new array never touch their inputs; the ``*_at_offset``
helpers mutate ``dst`` and are only ever handed scratch buffers owned by
the caller.
"""
from typing import List, Sequence, Tuple

from .errors import InvariantError
from .radix import DEFAULT_RADIX, Radix


def add_digit(a: int, b: int, radix: Radix = DEFAULT_RADIX) -> Tuple[int, int]:
    acc = a + b
    return acc & radix.mask, acc >> radix.bits


def sub_digit(a: int, b: int, p: int, radix: Radix = DEFAULT_RADIX) -> Tuple[int, int]:
    res = a - b - p
    if res < 0:
        return res + radix.base, 1
    return res, 0


def add(a: Sequence[int], b: Sequence[int], radix: Radix = DEFAULT_RADIX) -> Tuple[List[int], int]:
    if len(a) < len(b):
        a, b = b, a
    out: List[int] = []
    carry = 0
    for i in range(len(a)):
        acc, carry = add_digit(a[i], (b[i] if i < len(b) else 0) + carry, radix)
        out.append(acc)
    return out, carry


def subtract(a: Sequence[int], b: Sequence[int], radix: Radix = DEFAULT_RADIX) -> Tuple[List[int], int]:
    size = max(len(a), len(b))
    out: List[int] = []
    borrow = 0
    for i in range(size):
        acc, borrow = sub_digit(a[i] if i < len(a) else 0, b[i] if i < len(b) else 0, borrow, radix)
        out.append(acc)
    return out, borrow


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    for i in range(max(len(a), len(b)) - 1, -1, -1):
        l = a[i] if i < len(a) else 0
        r = b[i] if i < len(b) else 0
        if l != r:
            return 1 if l > r else -1
    return 0


def shift(a: Sequence[int], k: int) -> List[int]:
    if k < 0:
        raise ValueError(f"shift must be non-negative, got {k}")
    return [0] * k + list(a)


def add_at_offset(dst: List[int], src: Sequence[int], offset: int,
                  radix: Radix = DEFAULT_RADIX, grow: bool = True) -> List[int]:
    """
    Adds ``src * B^offset`` into ``dst``.

    With ``grow`` the buffer is extended to hold the whole carry chain.
    Without it ``dst`` is a fixed-size product buffer and any non-zero value
    landing past its top digit is an ``InvariantError``.
    """
    if grow and offset > len(dst):
        dst.extend([0] * (offset - len(dst)))

    carry = 0
    i = offset
    for digit in src:
        if i >= len(dst):
            if digit + carry == 0:
                i += 1
                continue
            if not grow:
                raise InvariantError(
                    f"carry out of fixed buffer of {len(dst)} digits at position {i}")
            dst.append(0)
        dst[i], carry = add_digit(dst[i], digit + carry, radix)
        i += 1

    while carry:
        if i >= len(dst):
            if not grow:
                raise InvariantError(
                    f"carry out of fixed buffer of {len(dst)} digits at position {i}")
            dst.append(0)
        dst[i], carry = add_digit(dst[i], carry, radix)
        i += 1
    return dst


def sub_at_offset(dst: List[int], src: Sequence[int], offset: int,
                  radix: Radix = DEFAULT_RADIX) -> List[int]:
    borrow = 0
    i = offset
    for digit in src:
        if i >= len(dst):
            if digit + borrow == 0:
                i += 1
                continue
            raise InvariantError(f"borrow out of buffer of {len(dst)} digits at position {i}")
        dst[i], borrow = sub_digit(dst[i], digit, borrow, radix)
        i += 1

    while borrow:
        if i >= len(dst):
            raise InvariantError(f"borrow out of buffer of {len(dst)} digits at position {i}")
        dst[i], borrow = sub_digit(dst[i], 0, borrow, radix)
        i += 1
    return dst

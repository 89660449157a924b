from dataclasses import dataclass, field
from typing import List, Sequence

DEFAULT_BITS = 32


@dataclass(frozen=True)
class Radix:
    """Digit width of a magnitude. Every digit lives in ``[0, max_digit]``."""

    bits: int = DEFAULT_BITS
    base: int = field(init=False)
    mask: int = field(init=False)

    def __post_init__(self) -> None:
        if self.bits < 1:
            raise ValueError(f"digit width must be at least one bit, got {self.bits}")
        object.__setattr__(self, "base", 1 << self.bits)
        object.__setattr__(self, "mask", (1 << self.bits) - 1)

    @property
    def max_digit(self) -> int:
        return self.mask

    def __repr__(self) -> str:
        return f"Radix(bits={self.bits})"


DEFAULT_RADIX = Radix(DEFAULT_BITS)


def from_digits(digits: Sequence[int], radix: Radix = DEFAULT_RADIX) -> int:
    a = 0
    for x in reversed(digits):
        a = (a << radix.bits) | x
    return a


def to_digits(n: int, radix: Radix = DEFAULT_RADIX) -> List[int]:
    if n < 0:
        raise ValueError(f"magnitudes are non-negative, got {n}")
    a: List[int] = []
    while n:
        a.append(n & radix.mask)
        n >>= radix.bits
    return a


def trim(digits: Sequence[int]) -> List[int]:
    i = len(digits)
    while i > 0:
        if digits[i - 1] != 0:
            break
        i -= 1
    return list(digits[:i])


def pad(digits: Sequence[int], length: int) -> List[int]:
    out = list(digits)
    if len(out) < length:
        out.extend([0] * (length - len(out)))
    return out

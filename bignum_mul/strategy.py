"""
Algorithm selection for the multiplication core.

The three multipliers form a closed set behind one calling convention.
``SelectionPolicy`` is the seam a surrounding library uses to pick one by
operand length; ``cross_check`` runs several of them and insists that they
agree.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence

from .balance import multiply_balance
from .errors import InvariantError
from .karatsuba import KARATSUBA_THRESHOLD, multiply_karatsuba
from .normal import multiply_normal
from .radix import DEFAULT_RADIX, Radix, from_digits, to_digits, trim

logger = logging.getLogger(__name__)

BALANCE_RATIO = 2


@dataclass(frozen=True)
class Multiplier:
    name: str
    func: Callable[[Sequence[int], Sequence[int], Radix], List[int]]

    def __call__(self, x: Sequence[int], y: Sequence[int], radix: Radix = DEFAULT_RADIX) -> List[int]:
        return self.func(x, y, radix)


NORMAL = Multiplier("normal", multiply_normal)
BALANCE = Multiplier("balance", multiply_balance)
KARATSUBA = Multiplier("karatsuba", multiply_karatsuba)

MULTIPLIERS: Dict[str, Multiplier] = {m.name: m for m in (NORMAL, BALANCE, KARATSUBA)}


def get_multiplier(name: str) -> Multiplier:
    try:
        return MULTIPLIERS[name]
    except KeyError:
        raise ValueError(
            f"unknown multiplication method {name!r}, expected one of {sorted(MULTIPLIERS)}") from None


@dataclass(frozen=True)
class SelectionPolicy:
    karatsuba_threshold: int = KARATSUBA_THRESHOLD
    balance_ratio: int = BALANCE_RATIO

    def __post_init__(self) -> None:
        if self.karatsuba_threshold < 1:
            raise ValueError(f"karatsuba threshold must be at least 1, got {self.karatsuba_threshold}")
        if self.balance_ratio < 1:
            raise ValueError(f"balance ratio must be at least 1, got {self.balance_ratio}")

    def choose(self, n: int, m: int) -> Multiplier:
        short, long = min(n, m), max(n, m)
        if short < self.karatsuba_threshold:
            return NORMAL
        if long >= self.balance_ratio * short:
            return BALANCE
        return Multiplier(
            KARATSUBA.name,
            lambda x, y, radix: multiply_karatsuba(x, y, radix, threshold=self.karatsuba_threshold),
        )


DEFAULT_POLICY = SelectionPolicy()


def multiply(x: Sequence[int], y: Sequence[int], radix: Radix = DEFAULT_RADIX,
             policy: SelectionPolicy = DEFAULT_POLICY) -> List[int]:
    chosen = policy.choose(len(x), len(y))
    logger.debug("multiply: %d x %d digits -> %s", len(x), len(y), chosen.name)
    return chosen(x, y, radix)


def cross_check(x: Sequence[int], y: Sequence[int], radix: Radix = DEFAULT_RADIX,
                names: Iterable[str] = ("normal", "balance", "karatsuba")) -> List[int]:
    """
    Multiplies with every named method and compares the products.

    Returns the schoolbook product. Raises ``InvariantError`` naming the
    first differing digit when any method disagrees with it.
    """
    expected = multiply_normal(x, y, radix)
    want = trim(expected)
    for name in names:
        got = trim(get_multiplier(name)(x, y, radix))
        if len(got) != len(want):
            raise InvariantError(f"{name}: mismatch len {len(got)} != {len(want)}")
        for i in range(len(want)):
            if got[i] != want[i]:
                raise InvariantError(f"{name}: mismatch value {i}: {got[i]} != {want[i]}")
    return expected


def multiply_int(x: int, y: int, method: str = "normal", radix: Radix = DEFAULT_RADIX) -> int:
    mul = get_multiplier(method)
    return from_digits(mul(to_digits(x, radix), to_digits(y, radix), radix), radix)

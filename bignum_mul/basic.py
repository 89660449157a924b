from typing import Sequence, Tuple, Union

from .radix import DEFAULT_RADIX, Radix, from_digits, to_digits, trim
from .strategy import DEFAULT_POLICY, SelectionPolicy, get_multiplier, multiply


class Magnitude:
    """Immutable non-negative bignum: a digit tuple, least significant first."""

    __slots__ = ("rep", "radix")

    def __init__(self, n: Union[int, Sequence[int]] = 0, radix: Radix = DEFAULT_RADIX) -> None:
        self.radix = radix
        if isinstance(n, int):
            self.rep: Tuple[int, ...] = tuple(to_digits(n, radix))
        else:
            for d in n:
                if not 0 <= d <= radix.max_digit:
                    raise ValueError(f"digit {d} out of range for {radix!r}")
            self.rep = tuple(n)

    @classmethod
    def from_int(cls, n: int, radix: Radix = DEFAULT_RADIX) -> 'Magnitude':
        return cls(n, radix)

    def to_int(self) -> int:
        return from_digits(self.rep, self.radix)

    def trim(self) -> 'Magnitude':
        return Magnitude(trim(self.rep), self.radix)

    def _check(self, other: 'Magnitude') -> None:
        if self.radix != other.radix:
            raise ValueError(f"radix mismatch: {self.radix!r} != {other.radix!r}")

    def _mul_with(self, other: Union['Magnitude', int], method: str) -> 'Magnitude':
        if isinstance(other, int):
            other = Magnitude(other, self.radix)
        self._check(other)
        return Magnitude(get_multiplier(method)(self.rep, other.rep, self.radix), self.radix)

    def mul_normal(self, other: Union['Magnitude', int]) -> 'Magnitude':
        return self._mul_with(other, "normal")

    def mul_balance(self, other: Union['Magnitude', int]) -> 'Magnitude':
        return self._mul_with(other, "balance")

    def mul_karatsuba(self, other: Union['Magnitude', int]) -> 'Magnitude':
        return self._mul_with(other, "karatsuba")

    def multiply(self, other: Union['Magnitude', int],
                 policy: SelectionPolicy = DEFAULT_POLICY) -> 'Magnitude':
        if isinstance(other, int):
            other = Magnitude(other, self.radix)
        self._check(other)
        return Magnitude(multiply(self.rep, other.rep, self.radix, policy), self.radix)

    def __mul__(self, other: Union['Magnitude', int]) -> 'Magnitude':
        if not isinstance(other, (Magnitude, int)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: int) -> 'Magnitude':
        if not isinstance(other, int):
            return NotImplemented
        return Magnitude(other, self.radix).multiply(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Magnitude):
            return self.radix == other.radix and trim(self.rep) == trim(other.rep)
        if isinstance(other, int):
            return self.to_int() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.radix, tuple(trim(self.rep))))

    def __getitem__(self, val: Union[int, slice]) -> Union[int, 'Magnitude']:
        if isinstance(val, slice):
            return Magnitude(self.rep[val], self.radix)
        return self.rep[val]

    def __len__(self) -> int:
        return len(self.rep)

    def __str__(self) -> str:
        return str(self.to_int())

    def __repr__(self) -> str:
        return f"{list(self.rep)}"

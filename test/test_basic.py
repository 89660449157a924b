import pytest

from bignum_mul.basic import Magnitude
from bignum_mul.radix import Radix
from bignum_mul.strategy import SelectionPolicy


def test_from_int_round_trip(radix):
    n = 827394650391827364598273645982736459827364598273645982736459827364598273645982736459982
    mag = Magnitude.from_int(n, radix)
    assert mag.to_int() == n
    assert str(mag) == str(n)


def test_zero():
    assert len(Magnitude()) == 0
    assert Magnitude() == 0
    assert Magnitude([0, 0]) == Magnitude()


def test_rejects_negative_and_out_of_range():
    with pytest.raises(ValueError):
        Magnitude(-5)
    with pytest.raises(ValueError):
        Magnitude([256], Radix(8))


def test_slicing_and_indexing():
    mag = Magnitude([1, 2, 3], Radix(8))
    assert mag[0] == 1
    assert isinstance(mag[1:], Magnitude)
    assert mag[1:].to_int() == 2 + 3 * 256


def test_trim_keeps_value():
    mag = Magnitude([1, 0, 0], Radix(8))
    assert len(mag.trim()) == 1
    assert mag.trim() == mag
    assert hash(mag.trim()) == hash(mag)


@pytest.mark.parametrize("method", ["mul_normal", "mul_balance", "mul_karatsuba"])
def test_mul_methods(radix, method):
    b = radix.base
    x = Magnitude(b * b + 1, radix)
    y = Magnitude(b + 1, radix)
    z = getattr(x, method)(y)
    assert len(z) == len(x) + len(y)
    assert z == b ** 3 + b ** 2 + b + 1


def test_operator_and_int_operands(radix):
    x = Magnitude(12345678901234567890, radix)
    assert (x * 3).to_int() == 12345678901234567890 * 3
    assert (3 * x).to_int() == 12345678901234567890 * 3
    assert (x * x).to_int() == 12345678901234567890 ** 2


def test_multiply_with_policy(radix):
    x = Magnitude(7 ** 200, radix)
    y = Magnitude(13 ** 90, radix)
    z = x.multiply(y, SelectionPolicy(karatsuba_threshold=1))
    assert z == 7 ** 200 * 13 ** 90


def test_radix_mismatch():
    with pytest.raises(ValueError, match="radix mismatch"):
        Magnitude(5, Radix(8)) * Magnitude(5, Radix(16))


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Magnitude(5) * 2.5


def test_repr():
    assert repr(Magnitude([1, 2], Radix(8))) == "[1, 2]"

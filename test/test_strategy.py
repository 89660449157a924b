import logging

import pytest

from bignum_mul import strategy
from bignum_mul.errors import InvariantError
from bignum_mul.normal import multiply_normal
from bignum_mul.radix import Radix, from_digits, to_digits
from bignum_mul.strategy import (BALANCE, KARATSUBA, MULTIPLIERS, NORMAL, Multiplier, SelectionPolicy,
                                 cross_check, get_multiplier, multiply, multiply_int)


def test_registry_is_closed_set():
    assert sorted(MULTIPLIERS) == ["balance", "karatsuba", "normal"]
    assert get_multiplier("normal") is NORMAL
    assert get_multiplier("balance") is BALANCE
    assert get_multiplier("karatsuba") is KARATSUBA


def test_unknown_multiplier():
    with pytest.raises(ValueError, match="toom3"):
        get_multiplier("toom3")


def test_multiplier_is_callable(radix):
    assert NORMAL([1, 1], [1, 1], radix) == [1, 2, 1, 0]
    assert KARATSUBA([1, 1], [1, 1], radix) == [1, 2, 1, 0]


@pytest.mark.parametrize(
    "n, m, expected",
    [
        (1, 1, "normal"),
        (3, 500, "normal"),
        (4, 4, "karatsuba"),
        (4, 7, "karatsuba"),
        (4, 8, "balance"),
        (9, 4, "balance"),
    ],
)
def test_policy_choice(n, m, expected):
    policy = SelectionPolicy(karatsuba_threshold=4)
    assert policy.choose(n, m).name == expected


def test_default_policy_prefers_normal_for_small_operands():
    assert SelectionPolicy().choose(10, 10) is NORMAL


@pytest.mark.parametrize("kwargs", [{"karatsuba_threshold": 0}, {"balance_ratio": 0}])
def test_policy_validation(kwargs):
    with pytest.raises(ValueError):
        SelectionPolicy(**kwargs)


def test_multiply_dispatch(radix, caplog):
    policy = SelectionPolicy(karatsuba_threshold=2)
    x = to_digits(3 ** 300, radix)
    y = to_digits(3 ** 280, radix)
    with caplog.at_level(logging.DEBUG, logger="bignum_mul.strategy"):
        z = multiply(x, y, radix, policy)
    assert from_digits(z, radix) == 3 ** 580
    assert "-> karatsuba" in caplog.text


def test_cross_check_returns_schoolbook_product(radix):
    x = [radix.max_digit, 0, 1]
    y = [1, radix.max_digit]
    assert cross_check(x, y, radix) == multiply_normal(x, y, radix)


def test_cross_check_reports_mismatch(monkeypatch):
    broken = Multiplier("broken", lambda x, y, radix: [1, 2, 2, 0])
    monkeypatch.setitem(strategy.MULTIPLIERS, "broken", broken)
    with pytest.raises(InvariantError, match="broken: mismatch value 2: 2 != 1"):
        cross_check([1, 1], [1, 1], Radix(8), names=["broken"])


def test_cross_check_reports_length_mismatch(monkeypatch):
    broken = Multiplier("short", lambda x, y, radix: [1, 2])
    monkeypatch.setitem(strategy.MULTIPLIERS, "short", broken)
    with pytest.raises(InvariantError, match="mismatch len"):
        cross_check([1, 1], [1, 1], Radix(8), names=["short"])


def test_multiply_int_methods_agree():
    a = 285933257128949549255701316273566808167968248937185782458137126418048882129169908160636217166197230933551105951409995695217855486946742356375826343875864750692692370708818530563648325264739241121034079
    b = 306148553827645126378519434018193318495011822711963727391209954020528493864535209911159790699446229795516566739272057174475304538951592019486676553726213677917762908009727837714458341572581842964938427
    for method in MULTIPLIERS:
        assert multiply_int(a, b, method) == a * b
        assert multiply_int(a, b, method, Radix(31)) == a * b

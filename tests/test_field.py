import pytest
from hypothesis import given
from hypothesis import strategies as st

from shamirssecret.errors import NotInvertibleError
from shamirssecret.field import (
    MERSENNE_127,
    PRIMES,
    extended_gcd,
    mod_divide,
    mod_inverse,
    mod_reduce,
)


def test_named_primes():
    assert MERSENNE_127 == 170141183460469231731687303715884105727
    assert PRIMES["mersenne-2281"] == 2**2281 - 1
    assert set(PRIMES) == {
        "mersenne-127",
        "mersenne-521",
        "mersenne-607",
        "mersenne-1279",
        "mersenne-2203",
        "mersenne-2281",
    }


def test_mod_reduce_negative():
    assert mod_reduce(-1, 7) == 6
    assert mod_reduce(-14, 7) == 0
    assert mod_reduce(15, 7) == 1


def test_extended_gcd_bezout():
    x, y = extended_gcd(240, 46)
    assert 240 * x + 46 * y == 2


def test_mod_inverse_is_unreduced():
    assert mod_inverse(3, 7) == -2
    assert mod_divide(1, 3, 7) == -2
    assert mod_divide(6, 3, 7) % 7 == 2


def test_mod_inverse_negative_denominator():
    inv = mod_inverse(-2, 7)
    assert (-2 * inv) % 7 == 1


@pytest.mark.parametrize("den", [0, 7, -21])
def test_mod_inverse_of_zero(den):
    with pytest.raises(NotInvertibleError):
        mod_inverse(den, 7)


def test_not_invertible_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        mod_divide(5, 0, MERSENNE_127)


def test_mod_inverse_requires_coprime_modulus():
    with pytest.raises(NotInvertibleError):
        mod_inverse(4, 8)


@given(st.integers(min_value=-(2**200), max_value=2**200).filter(lambda v: v % MERSENNE_127))
def test_mod_inverse_property(den):
    assert (den * mod_inverse(den, MERSENNE_127)) % MERSENNE_127 == 1

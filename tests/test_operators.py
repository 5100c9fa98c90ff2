import pytest

from core.exceptions import (
    DivisionByZeroError, ModuloByZeroError, ExponentiationError, UnknownOperatorError
)
from core.operators import Operators, INT64_MIN, INT64_MAX, wrap_int64
from core.token_system import OperatorSymbol


def test_int64_bounds():
    assert INT64_MAX == 2 ** 63 - 1
    assert INT64_MIN == -2 ** 63


def test_wrap_int64():
    assert wrap_int64(2 ** 63) == INT64_MIN
    assert wrap_int64(-2 ** 63 - 1) == INT64_MAX
    assert wrap_int64(5) == 5
    assert wrap_int64(-5) == -5


def test_add_sub_mul_wrap_around():
    assert Operators.add(INT64_MAX, 1) == INT64_MIN
    assert Operators.sub(INT64_MIN, 1) == INT64_MAX
    assert Operators.mul(3037000500, 3037000500) == -9223372036709301616
    assert Operators.add(2, 3) == 5
    assert Operators.mul(-4, 6) == -24


def test_neg():
    assert Operators.neg(7) == -7
    assert Operators.neg(-7) == 7
    assert Operators.neg(INT64_MIN) == INT64_MIN


@pytest.mark.parametrize("a,b,expected", [
    (7, 2, 3),
    (-7, 2, -3),
    (7, -2, -3),
    (-7, -2, 3),
    (0, 5, 0),
    (INT64_MIN, -1, INT64_MIN),
])
def test_div_truncates_toward_zero(a, b, expected):
    assert Operators.div(a, b) == expected


@pytest.mark.parametrize("a,b,expected", [
    (7, 3, 1),
    (-7, 3, -1),
    (7, -3, 1),
    (-7, -3, -1),
    (INT64_MIN, -1, 0),
])
def test_mod_follows_dividend_sign(a, b, expected):
    assert Operators.mod(a, b) == expected


def test_division_and_modulo_by_zero():
    with pytest.raises(DivisionByZeroError):
        Operators.div(5, 0)
    with pytest.raises(ModuloByZeroError):
        Operators.mod(5, 0)


@pytest.mark.parametrize("base,exp,expected", [
    (2, 10, 1024),
    (2, 62, 2 ** 62),
    (-3, 3, -27),
    (-2, 4, 16),
    (0, 0, 1),
    (0, 5, 0),
    (1, 10 ** 18, 1),
    (-1, 10 ** 18 + 1, -1),
])
def test_pow(base, exp, expected):
    assert Operators.pow(base, exp) == expected


@pytest.mark.parametrize("base,exp", [
    (2, 63),
    (2, 100),
    (10, 19),
    (2, -1),
])
def test_pow_rejects_overflow_and_negative_exponent(base, exp):
    with pytest.raises(ExponentiationError):
        Operators.pow(base, exp)


def test_apply_dispatches_by_symbol():
    assert Operators.apply(OperatorSymbol.SUB, 10, 4) == 6
    assert Operators.apply(OperatorSymbol.NEG, 4) == -4
    with pytest.raises(UnknownOperatorError):
        Operators.apply(None, 1, 2)

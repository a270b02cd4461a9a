import math

import pytest

from numcraft.compare import (
    approximate_sqrt,
    max3,
    max4,
    median3,
    remainder,
    symbolic_comparison,
)


@pytest.mark.parametrize("args", [(1, 2, 3), (3, 2, 1), (2, 3, 1), (3, 3, 1)])
def test_max3_integers(args):
    assert max3(*args) == 3


def test_max3_floats():
    assert max3(-1.5, -0.25, -7.0) == -0.25


@pytest.mark.parametrize("args", [(1.5, -2.0, 9.25, 3.0), (9.25, 1.5, -2.0, 3.0), (3.0, 1.5, -2.0, 9.25)])
def test_max4_picks_largest(args):
    assert max4(*args) == 9.25


def test_max4_all_equal():
    assert max4(4, 4, 4, 4) == 4


@pytest.mark.parametrize(
    "args", [(1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1)]
)
def test_median3_permutations(args):
    assert median3(*args) == 2


def test_median3_with_ties():
    assert median3(5, 5, 1) == 5
    assert median3(1, 5, 1) == 1


@pytest.mark.parametrize(
    "args, expected",
    [
        ((1, 2, 3), "3 > 2 > 1"),
        ((3, 1, 2), "3 > 2 > 1"),
        ((5, 5, 5), "5 = 5 = 5"),
        ((2, 2, 1), "2 = 2 > 1"),
        ((1, 2, 2), "2 = 2 > 1"),
        ((1, 2, 1), "2 > 1 = 1"),
    ],
)
def test_symbolic_comparison(args, expected):
    assert symbolic_comparison(*args) == expected


@pytest.mark.parametrize("x, y", [(7.5, 2.0), (-7.5, 2.0), (10.0, 3.0), (0.5, 4.0)])
def test_remainder_invariants(x, y):
    r = remainder(x, y)
    assert abs(r) < abs(y)
    quotient = (x - r) / y
    assert quotient == pytest.approx(round(quotient))
    assert r == 0 or math.copysign(1, r) == math.copysign(1, x)


def test_remainder_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        remainder(1.0, 0.0)


@pytest.mark.parametrize("num", [2.0, 4.0, 10.0, 0.5])
def test_approximate_sqrt_within_tolerance(num):
    result = approximate_sqrt(num)
    assert abs(num - result * result) <= 0.001
    assert abs(result - math.sqrt(num)) < 0.001


def test_approximate_sqrt_is_first_step_within_tolerance():
    result = approximate_sqrt(2.0)
    previous = result - 0.0001
    assert abs(2.0 - previous * previous) > 0.001


def test_approximate_sqrt_of_zero():
    assert approximate_sqrt(0.0) == 0.0


def test_approximate_sqrt_negative():
    with pytest.raises(ValueError):
        approximate_sqrt(-1.0)


def test_approximate_sqrt_coarse_step():
    with pytest.raises(ValueError):
        approximate_sqrt(2.0, tolerance=1e-9, step=0.5)
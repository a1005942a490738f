import pytest
from hypothesis import given, strategies as st

from mathbits.power import power, power_iterative

bases = st.integers(min_value=-1000, max_value=1000)
exponents = st.integers(min_value=0, max_value=200)


@pytest.mark.parametrize("func", [power, power_iterative])
@given(x=bases, n=exponents)
def test_matches_builtin(func, x, n):
    assert func(x, n) == x**n


@pytest.mark.parametrize("func", [power, power_iterative])
@given(x=bases)
def test_zero_exponent(func, x):
    assert func(x, 0) == 1


@pytest.mark.parametrize("func", [power, power_iterative])
@given(x=bases, n=st.integers(min_value=1, max_value=100))
def test_exponent_step(func, x, n):
    assert func(x, n) == x * func(x, n - 1)


@given(bases, exponents)
def test_both_methods_agree(x, n):
    assert power(x, n) == power_iterative(x, n)


@pytest.mark.parametrize("func", [power, power_iterative])
def test_negative_exponent_raises(func):
    with pytest.raises(ValueError):
        func(2, -1)
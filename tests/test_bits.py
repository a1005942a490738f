import pytest
from hypothesis import given, strategies as st

from mathbits.bits import count_set_bits, is_kth_bit_set

naturals = st.integers(min_value=0, max_value=2**80)
positions = st.integers(min_value=1, max_value=90)


@given(positions)
def test_single_bit_is_set(k):
    assert is_kth_bit_set(1 << (k - 1), k) is True


@given(positions)
def test_zero_has_no_bits(k):
    assert is_kth_bit_set(0, k) is False


@given(naturals, positions)
def test_setting_a_bit_makes_it_set(n, k):
    assert is_kth_bit_set(n | (1 << (k - 1)), k) is True


@given(naturals, positions)
def test_clearing_a_bit_makes_it_unset(n, k):
    assert is_kth_bit_set(n & ~(1 << (k - 1)), k) is False


@pytest.mark.parametrize("k", [0, -1])
def test_bad_position_raises(k):
    with pytest.raises(ValueError):
        is_kth_bit_set(5, k)


def test_zero_has_no_set_bits():
    assert count_set_bits(0) == 0


@given(naturals)
def test_count_matches_binary_form(n):
    assert count_set_bits(n) == bin(n).count("1")


@given(st.integers(min_value=0, max_value=100))
def test_all_ones_counts_width(k):
    assert count_set_bits((1 << k) - 1) == k


@given(st.integers(min_value=0, max_value=100))
def test_power_of_two_has_one_bit(k):
    assert count_set_bits(1 << k) == 1


def test_negative_count_raises():
    with pytest.raises(ValueError):
        count_set_bits(-3)
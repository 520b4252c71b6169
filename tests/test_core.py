import pytest

from hazel.core import bit


def test_bit_zero_is_one():
    assert bit(0) == 1


@pytest.mark.parametrize("n", range(0, 31))
def test_each_bit_doubles_the_previous(n):
    assert bit(n + 1) == bit(n) * 2


@pytest.mark.parametrize("n", range(0, 16))
def test_bit_has_single_bit_set(n):
    value = bit(n)
    assert value & (value - 1) == 0
    assert value.bit_length() == n + 1


def test_distinct_bits_do_not_overlap():
    assert bit(2) & bit(3) == 0
    assert bit(2) | bit(3) == bit(2) + bit(3)


def test_negative_bit_raises():
    with pytest.raises(ValueError):
        bit(-1)
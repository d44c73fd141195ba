import random

import pytest

from linksocket.randomness import gen_bool, gen_range_f32, gen_range_u32


def test_float_range_stays_in_bounds():
    random.seed(7)
    values = [gen_range_f32(2.0, 3.0) for _ in range(500)]
    assert all(2.0 <= value < 3.0 for value in values)


def test_float_range_rejects_empty():
    with pytest.raises(ValueError):
        gen_range_f32(1.0, 1.0)


def test_int_range_stays_in_bounds():
    random.seed(7)
    values = {gen_range_u32(3, 8) for _ in range(500)}
    assert values <= set(range(3, 8))
    assert 3 in values and 7 in values


def test_int_range_of_one_value():
    assert {gen_range_u32(5, 6) for _ in range(20)} == {5}


@pytest.mark.parametrize("lower, upper", [(4, 4), (5, 2), (-1, 3)])
def test_int_range_rejects_invalid(lower, upper):
    with pytest.raises(ValueError):
        gen_range_u32(lower, upper)


def test_bool_takes_both_values():
    random.seed(3)
    assert {gen_bool() for _ in range(200)} == {True, False}
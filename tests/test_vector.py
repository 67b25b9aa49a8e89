import dataclasses

import pytest

from controlroom.vector import Vector2f, Vector2i


def test_default_is_zero():
    assert Vector2f() == Vector2f(0, 0)
    assert Vector2i() == Vector2i(0, 0)


def test_magnitude_of_three_four():
    assert Vector2f(3, 4).magnitude() == pytest.approx(5.0)


def test_normalise_gives_unit_length():
    v = Vector2f(-6.5, 2.25).normalise()
    assert v.magnitude() == pytest.approx(1.0)


def test_normalise_keeps_direction():
    original = Vector2f(8, 2)
    unit = original.normalise()
    assert unit.x / unit.y == pytest.approx(original.x / original.y)


def test_normalise_zero_vector_stays_zero():
    assert Vector2f().normalise() == Vector2f()


def test_add_sub_round_trip():
    a = Vector2f(1.5, -2.0)
    b = Vector2f(0.25, 4.0)
    assert (a + b) - b == a


def test_scalar_multiplication_matches_addition():
    v = Vector2f(1.5, -3.0)
    assert v * 2 == v + v
    assert 2 * v == v * 2


def test_componentwise_mul_div_round_trip():
    a = Vector2f(3.0, -5.0)
    b = Vector2f(2.0, 4.0)
    assert (a * b) / b == a


def test_float_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2f(1, 1) / Vector2f(0, 1)


def test_vectors_are_immutable():
    v = Vector2f(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 3
    assert v.x == 1
    assert v == Vector2f(1, 2)


def test_int_add_sub_mul_round_trip():
    a = Vector2i(7, -3)
    b = Vector2i(2, 5)
    assert (a + b) - b == a
    assert (a * b) / b == a


def test_int_division_truncates_toward_zero():
    assert Vector2i(-7, 7) / Vector2i(2, 2) == Vector2i(-3, 3)


def test_int_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2i(4, 4) / Vector2i(0, 1)


def test_mixing_types_is_rejected():
    with pytest.raises(TypeError):
        Vector2f(1, 1) + Vector2i(1, 1)
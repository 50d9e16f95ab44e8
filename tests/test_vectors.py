import math

import pytest

from animodeler.vectors import (
    Vec2,
    Vec3,
    Vec4,
    dot_affine,
    parse_vec3,
    parse_vec4,
    vec4to3,
)


def test_default_vectors_are_zero():
    assert Vec2().is_zero()
    assert Vec3().is_zero()
    assert Vec4().is_zero()


def test_add_and_sub_round_trip():
    a = Vec3(1.5, -2.0, 4.0)
    b = Vec3(0.5, 3.0, -1.0)
    assert (a + b) - b == a


def test_in_place_operators_match_binary_ones():
    a = Vec2(3.0, 4.0)
    b = Vec2(1.0, 2.0)
    expected = a + b
    a += b
    assert a == expected
    a -= b
    assert a == Vec2(3.0, 4.0)


def test_scalar_multiply_and_divide_round_trip():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    assert (v * 2.0) / 2.0 == v
    assert 2.0 * v == v * 2.0


def test_negation_sums_to_zero():
    v = Vec3(1.0, -2.0, 3.0)
    assert (v + -v).is_zero()


def test_cross_product_is_orthogonal_and_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a ^ b
    assert c * a == pytest.approx(0.0)
    assert c * b == pytest.approx(0.0)
    assert c == -(b ^ a)


def test_cross_of_parallel_vectors_is_zero():
    a = Vec3(1.0, 2.0, 3.0)
    assert (a ^ (a * 2.0)).is_zero()


def test_dot_product_equals_squared_length():
    v = Vec3(2.0, -3.0, 6.0)
    assert v * v == pytest.approx(v.length2())


def test_normalize_gives_unit_length():
    v = Vec4(1.0, 2.0, 2.0, 4.0)
    v.normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().normalize()


def test_zero_elements_clears():
    v = Vec2(5.0, 6.0)
    v.zero_elements()
    assert v.is_zero()


def test_clamp_limits_to_unit_range():
    v = Vec3(-0.5, 0.25, 2.0)
    v.clamp()
    assert list(v) == [0.0, 0.25, 1.0]


def test_dot_affine_adds_fourth_element():
    v3 = Vec3(1.0, 2.0, 3.0)
    assert dot_affine(v3, Vec4(0.0, 0.0, 0.0, 7.5)) == 7.5


def test_mixed_products_match_dot_affine():
    v3 = Vec3(1.0, 2.0, 3.0)
    v4 = Vec4(4.0, 5.0, 6.0, 7.0)
    assert v3 * v4 == dot_affine(v3, v4)
    assert v4 * v3 == dot_affine(v3, v4)


def test_vec4to3_keeps_first_three():
    assert vec4to3(Vec4(1.0, 2.0, 3.0, 4.0)) == Vec3(1.0, 2.0, 3.0)


def test_str_and_parse_round_trip():
    v3 = Vec3(1.5, -2.0, 3.0)
    v4 = Vec4(0.5, 1.0, -1.5, 2.0)
    assert parse_vec3(str(v3)) == v3
    assert parse_vec4(str(v4)) == v4


def test_parse_too_few_numbers_raises():
    with pytest.raises(ValueError):
        parse_vec4("1 2 3")


def test_mixing_kinds_in_addition_raises():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) + Vec4(1.0, 2.0, 3.0, 4.0)


def test_different_kinds_are_not_equal():
    assert (Vec2(1.0, 2.0) == Vec3(1.0, 2.0, 0.0)) is False


def test_index_assignment():
    v = Vec3()
    v[1] = 4.0
    assert v[1] == 4.0
    assert math.isclose(v.length(), 4.0)
import pytest

from solarium.vector3 import Vector3


A = Vector3(1.5, -2.0, 4.0)
B = Vector3(0.5, 3.0, -1.0)


def test_default_is_zero_vector():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)


def test_add_then_subtract_round_trip():
    assert (A + B) - B == A


def test_add_is_commutative():
    assert A + B == B + A


def test_subtract_self_is_zero():
    assert A - A == Vector3()


def test_add_components():
    result = A + B
    assert result.x == A.x + B.x
    assert result.y == A.y + B.y
    assert result.z == A.z + B.z


def test_scalar_multiply_both_sides():
    assert 2 * A == A * 2
    assert 2 * A == A + A


def test_multiply_then_divide_round_trip():
    assert (A * 4.0) / 4.0 == A


def test_divide_by_one_is_identity():
    assert A / 1.0 == A


def test_magnitude_squared_unit_axis():
    assert Vector3(2.0, 0.0, 0.0).magnitude_squared() == 4.0


def test_magnitude_squared_scales_quadratically():
    assert (A * 2.0).magnitude_squared() == pytest.approx(4.0 * A.magnitude_squared())


def test_magnitude_squared_zero():
    assert Vector3().magnitude_squared() == 0.0


def test_vector_is_immutable():
    vector = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        vector.x = 10.0  # type: ignore[misc]
    assert vector.x == 1.0
    assert vector == Vector3(1.0, 2.0, 3.0)


def test_add_with_non_vector_raises():
    vector = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        vector + 1.0  # type: ignore[operator]
    assert vector + Vector3(1.0, 1.0, 1.0) == Vector3(2.0, 3.0, 4.0)
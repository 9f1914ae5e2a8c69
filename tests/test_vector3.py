import math

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from lumen.errors import DimensionMismatchError
from lumen.vector.vector2 import Vector2
from lumen.vector.vector3 import Vector3, Vector3Pos


def test_zero():
    assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)


def test_add_and_scale():
    a = Vector3(1.0, 2.0, 3.0)
    assert a.add(Vector3(4.0, -2.0, 0.5)) == Vector3(5.0, 0.0, 3.5)
    assert a.scale(-2.0) == Vector3(-2.0, -4.0, -6.0)
    assert a.scale(0.0) == Vector3.zero()
    assert a - a == Vector3.zero()


def test_mag_and_norm():
    v = Vector3(2.0, 3.0, 6.0)
    assert v.mag() == 7.0
    assert np.isclose(v.norm().mag(), 1.0, atol=1e-14)
    assert Vector3.zero().norm() == Vector3.zero()


def test_dot_is_commutative():
    a, b = Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 0.5, 2.0)
    assert a.dot(b) == 3.0
    assert a.dot(b) == b.dot(a)


def test_cross_basis():
    x, y, z = Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y


def test_cross_is_anti_commutative():
    a, b = Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 0.5, 2.0)
    assert a.cross(b) == b.cross(a).scale(-1.0)
    assert np.allclose(a.cross(b).to_numpy(), np.cross(a.to_numpy(), b.to_numpy()))


def test_cross_is_orthogonal_to_operands():
    a, b = Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert np.isclose(c.dot(a), 0.0)
    assert np.isclose(c.dot(b), 0.0)


def test_angle():
    a = Vector3(5.0, 0.0, 0.0)
    b = Vector3(0.0, 5.0, 0.0)
    assert np.isclose(a.angle(b), math.pi / 2)
    assert round(a.angle(b)) == 2


def test_angle_uses_product_of_magnitudes():
    # dot / |a| * |b| would be 35 here, far outside the domain of acos
    a = Vector3(2.0, 0.0, 0.0)
    b = Vector3(5.0, 5.0, 0.0)
    assert np.isclose(a.angle(b), math.pi / 4)


def test_angle_with_zero_vector_is_nan():
    assert math.isnan(Vector3.zero().angle(Vector3(1.0, 0.0, 0.0)))
    assert math.isnan(Vector3.zero().angle(Vector3.zero()))


def test_swap_left_right():
    a = Vector3(5.0, 0.0, 3.0)
    assert a.swap_left() == Vector3(0.0, 3.0, 5.0)
    assert a.swap_right() == Vector3(3.0, 5.0, 0.0)
    assert a.swap_left().swap_right() == a
    assert a.swap_right().swap_left() == a
    assert a.swap_left().swap_left().swap_left() == a


def test_downgrade():
    a = Vector3(5.0, 0.0, 1.0)
    assert a.downgrade(Vector3Pos.X) == Vector2(0.0, 1.0)
    assert a.downgrade(Vector3Pos.Y) == Vector2(5.0, 1.0)
    assert a.downgrade(Vector3Pos.Z) == Vector2(5.0, 0.0)


def test_downgrade_unknown_axis_drops_z():
    assert Vector3(1.0, 2.0, 3.0).downgrade("w") == Vector2(1.0, 2.0)


def test_rotate_quarter_turns():
    x, y, z = Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)
    assert y.rotate_x(math.pi / 2).isclose(z)
    assert z.rotate_y(math.pi / 2).isclose(x)
    assert x.rotate_z(math.pi / 2).isclose(y)


def test_rotation_leaves_axis_fixed():
    assert Vector3(2.0, 0.0, 0.0).rotate_x(1.234) == Vector3(2.0, 0.0, 0.0)
    assert Vector3(0.0, 0.0, -1.0).rotate_z(0.3).isclose(Vector3(0.0, 0.0, -1.0))


@pytest.mark.parametrize("axis", ["x", "y", "z"])
@pytest.mark.parametrize("angle", [0.3, -1.1, 2.9])
def test_rotation_matches_scipy(axis, angle):
    v = Vector3(1.5, -2.0, 0.25)
    rotated = getattr(v, f"rotate_{axis}")(angle)
    expected = Rotation.from_euler(axis, angle).apply(v.to_numpy())
    assert np.allclose(rotated.to_numpy(), expected, atol=1e-12)


def test_sequence_protocol_and_conversions():
    v = Vector3(1.0, 2.0, 3.0)
    assert list(v) == [1.0, 2.0, 3.0]
    assert len(v) == 3
    assert v[2] == 3.0
    assert Vector3.from_iterable((1, 2, 3)) == v
    assert Vector3.from_dict(v.to_dict()) == v
    with pytest.raises(DimensionMismatchError):
        Vector3.from_iterable([1, 2])


@pytest.mark.parametrize("v", [Vector3(1e200, -1e200, 1e200), Vector3(1e-170, 2e-170, 2e-170), Vector3(0.0, 0.0, 5e300)])
def test_norm_survives_overflow_and_underflow_in_squares(v):
    assert v.mag() not in (0.0, math.inf)
    assert np.isclose(v.norm().mag(), 1.0, atol=1e-14)


def test_mag_of_tiny_components():
    assert Vector3(1e-170, 2e-170, 2e-170).mag() == pytest.approx(3e-170)


@pytest.mark.parametrize("v", [Vector3(0.1, 0.7, 0.3), Vector3(3.0, 7.0, -1.0), Vector3(1e-3, 5.0, 2.0)])
def test_angle_of_parallel_vectors_under_rounding(v):
    # dot / (|v1| * |v2|) may round just past 1 (NaN) instead of raising
    for other in (v, v.scale(3.7)):
        a = v.angle(other)
        assert math.isnan(a) or 0.0 <= a <= 1e-7
    a = v.angle(-v)
    assert math.isnan(a) or math.pi - 1e-7 <= a <= math.pi

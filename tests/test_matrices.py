import math
from dataclasses import dataclass

import pytest

from skelengine.matrices import Matrix3, Matrix4
from skelengine.scalar import PI_OVER_2, is_close_enough, to_radians
from skelengine.vectors import Vector2, Vector3, Vector4

TEST_MAT4 = Matrix4(
    (
        (0.5, 0.0, 0.0, 0.0),
        (0.0, 0.0, -1.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (10.0, 20.0, -30.0, 1.0),
    )
)

TEST_MAT3 = Matrix3(((0.5, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0)))


@dataclass
class _Quat:
    x: float
    y: float
    z: float
    w: float


def _yaw_pitch_roll(rot: Vector3) -> Matrix4:
    return Matrix4.create_yaw_pitch_roll(rot.y, rot.x, rot.z)


def _deg(x, y, z) -> Vector3:
    return Vector3(to_radians(x), to_radians(y), to_radians(z))


# Matrix4


def test_default_is_identity():
    assert Matrix4() == Matrix4.identity()
    assert Matrix4.identity()[2] == (0.0, 0.0, 1.0, 0.0)


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Matrix4(((1.0, 0.0), (0.0, 1.0)))


def test_transform_position():
    p = TEST_MAT4.transform_vector3(Vector3(100.0, -200.0, 300.0))
    assert p.is_close(Vector3(60.0, 320.0, 170.0))


def test_transform_direction():
    d = TEST_MAT4.transform_vector3(Vector3(-10.0, 20.0, -30.0), 0.0)
    assert d.is_close(Vector3(-5.0, -30.0, -20.0))


def test_transform_vector4():
    v = TEST_MAT4.transform_vector4(Vector4(100.0, -200.0, 300.0, 1.0))
    assert v.is_close(Vector4(60.0, 320.0, 170.0, 0.0))


def test_invert():
    expected = Matrix4(
        (
            (2.0, 0.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, -1.0, 0.0, 0.0),
            (-20.0, -30.0, -20.0, 1.0),
        )
    )
    inv = TEST_MAT4.inverted()
    assert inv.is_close(expected)
    assert (TEST_MAT4 * inv).is_close(Matrix4.identity())
    assert (inv * TEST_MAT4).is_close(Matrix4.identity())


def test_invert_singular_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix4([[0.0] * 4 for _ in range(4)]).inverted()


def test_translation():
    trans = Vector3(100.0, -50.0, 0.5)
    m = Matrix4.create_translation(trans)
    expected = Matrix4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (100.0, -50.0, 0.5, 1.0),
        )
    )
    assert m.is_close(expected)
    assert m.translation().is_close(trans)


def test_rotation_x():
    expected = Matrix4(
        ((1.0, 0.0, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, -1.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    )
    assert Matrix4.create_rotation_x(to_radians(90.0)).is_close(expected)


def test_rotation_y():
    expected = Matrix4(
        ((0.0, 0.0, 1.0, 0.0), (0.0, 1.0, 0.0, 0.0), (-1.0, 0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    )
    assert Matrix4.create_rotation_y(to_radians(-90.0)).is_close(expected)


def test_rotation_z():
    expected = Matrix4(
        ((0.0, -1.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    )
    assert Matrix4.create_rotation_z(to_radians(-90.0)).is_close(expected)


@pytest.mark.parametrize(
    "rotation, expected",
    [
        (
            (90.0, 0.0, 0.0),
            ((1.0, 0.0, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, -1.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0)),
        ),
        (
            (0.0, 90.0, 0.0),
            ((0.0, 0.0, -1.0, 0.0), (0.0, 1.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0)),
        ),
        (
            (0.0, 0.0, 90.0),
            ((0.0, 1.0, 0.0, 0.0), (-1.0, 0.0, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0)),
        ),
        (
            (90.0, 90.0, 0.0),
            ((0.0, 0.0, -1.0, 0.0), (1.0, 0.0, 0.0, 0.0), (0.0, -1.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0)),
        ),
    ],
)
def test_yaw_pitch_roll(rotation, expected):
    assert _yaw_pitch_roll(_deg(*rotation)).is_close(Matrix4(expected))


def test_yaw_pitch_roll_combined():
    given = Matrix4(
        (
            (0.42261824, 0.90630776, 0.0, 0.0),
            (0.0, 0.0, -1.0, 0.0),
            (-0.90630776, 0.42261824, 0.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )
    result = _yaw_pitch_roll(_deg(90.0, 45.0, -20.0))
    assert result.is_close(given.transposed())


def test_create_scale_vector():
    expected = Matrix4(
        ((0.0, 0.0, 0.0, 0.0), (0.0, 2.0, 0.0, 0.0), (0.0, 0.0, -0.5, 0.0), (0.0, 0.0, 0.0, 1.0))
    )
    assert Matrix4.create_scale(Vector3(0.0, 2.0, -0.5)).is_close(expected)


def test_create_scale_uniform_and_separate():
    assert Matrix4.create_scale(3.0) == Matrix4.create_scale(3.0, 3.0, 3.0)
    assert Matrix4.create_scale(1.0, 2.0, 3.0)[1][1] == 2.0
    with pytest.raises(TypeError):
        Matrix4.create_scale(1.0, 2.0)


def test_look_at():
    expected = Matrix4(
        ((0.0, 0.0, -1.0, 0.0), (0.0, 1.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0), (10.0, 20.0, 30.0, 1.0))
    )
    look = Matrix4.create_look_at(
        Vector3(10.0, 20.0, 30.0), Vector3(30.0, 20.0, 30.0), Vector3(0.0, 1.0, 0.0)
    )
    assert look.is_close(expected)
    assert look.transform_vector3(Vector3(0.0, 0.0, 1.0), 0.0).is_close(Vector3(1.0, 0.0, 0.0))
    assert look.transform_vector3(Vector3(0.0, 1.0, 0.0), 0.0).is_close(Vector3(0.0, 1.0, 0.0))
    assert look.transform_vector3(Vector3(1.0, 0.0, 0.0), 0.0).is_close(Vector3(0.0, 0.0, -1.0))


def test_invert_composite_and_scale():
    test = (
        Matrix4.create_translation(Vector3(-100.0, 200.0, 300.0))
        * Matrix4.create_scale(Vector3(0.5, 2.0, -3.0))
        * Matrix4.create_yaw_pitch_roll(0.2, -1.0, 0.1)
    )
    assert (test * test.inverted()).is_close(Matrix4.identity())
    assert test.scale().is_close(Vector3(0.5, 2.0, 3.0))


def test_axes():
    m = Matrix4.create_rotation_x(to_radians(90.0))
    assert m.x_axis().is_close(Vector3(1.0, 0.0, 0.0))
    assert m.y_axis().is_close(Vector3(0.0, 0.0, 1.0))
    assert m.z_axis().is_close(Vector3(0.0, -1.0, 0.0))


def test_transposed_matrix4():
    t = TEST_MAT4.transposed()
    assert t[0] == (0.5, 0.0, 0.0, 10.0)
    assert t[3] == (0.0, 0.0, 0.0, 1.0)
    assert t.transposed() == TEST_MAT4


def test_from_quaternion():
    half = PI_OVER_2 / 2.0
    q = _Quat(0.0, 0.0, math.sin(half), math.cos(half))
    mat = Matrix4.create_from_quaternion(q)
    assert mat.transform_vector3(Vector3(1.0, 2.0, 3.0)).is_close(Vector3(-2.0, 1.0, 3.0))


def test_from_identity_quaternion():
    assert Matrix4.create_from_quaternion(_Quat(0.0, 0.0, 0.0, 1.0)) == Matrix4.identity()


def test_ortho():
    expected = Matrix4(
        ((1.0, 0.0, 0.0, 0.0), (0.0, 0.5, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    )
    assert Matrix4.create_ortho(2.0, 4.0, 0.0, 1.0).is_close(expected)


def test_perspective_fov():
    m = Matrix4.create_perspective_fov(math.pi / 2.0, 2.0, 1.0, 1.0, 2.0)
    expected = Matrix4(
        ((0.5, 0.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0), (0.0, 0.0, 2.0, 1.0), (0.0, 0.0, -2.0, 0.0))
    )
    assert m.is_close(expected)


def test_mul_with_other_type_fails():
    product = TEST_MAT4 * Matrix4.identity()
    assert product.is_close(TEST_MAT4)
    with pytest.raises(TypeError):
        _ = TEST_MAT4 * TEST_MAT3


# Matrix3


def test_matrix3_transform_vector2():
    rot = Matrix3(((0.0, 0.5, 0.0), (-0.5, 0.0, 0.0), (0.0, 0.0, 0.5)))
    v = rot.transform_vector2(Vector2(30.0, -26.0))
    assert is_close_enough(v.x, 13.0)
    assert is_close_enough(v.y, 15.0)


def test_matrix3_transform_vector3():
    v = TEST_MAT3.transform_vector3(Vector3(-10.0, 20.0, -30.0))
    assert v.is_close(Vector3(-5.0, -30.0, -20.0))


def test_matrix3_transpose_and_multiply():
    expected = Matrix3(((0.5, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, -1.0, 0.0)))
    assert TEST_MAT3.transposed().is_close(expected)
    rot = Matrix3.create_rotation(to_radians(63.0))
    inv = rot.transposed()
    assert (rot * inv).is_close(Matrix3.identity())
    assert (inv * rot).is_close(Matrix3.identity())


def test_matrix3_rotation():
    expected = Matrix3(((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)))
    assert Matrix3.create_rotation(to_radians(-90.0)).is_close(expected)


def test_matrix3_translation():
    expected = Matrix3(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (100.0, -50.0, 1.0)))
    tran = Matrix3.create_translation(Vector2(100.0, -50.0))
    assert tran.is_close(expected)
    moved = tran.transform_vector2(Vector2(-10.0, -20.0), 1.0)
    assert moved.is_close(Vector2(90.0, -70.0))


def test_matrix3_combined():
    expected = Matrix3(((0.0, 0.5, 0.0), (-0.5, 0.0, 0.0), (-10.0, 20.0, 1.0)))
    combined = (
        Matrix3.create_scale(0.5)
        * Matrix3.create_rotation(to_radians(90.0))
        * Matrix3.create_translation(Vector2(-10.0, 20.0))
    )
    assert combined.is_close(expected)


def test_matrix3_scale():
    expected = Matrix3(((2.0, 0.0, 0.0), (0.0, -0.5, 0.0), (0.0, 0.0, 1.0)))
    assert Matrix3.create_scale(Vector2(2.0, -0.5)).is_close(expected)
    assert Matrix3.create_scale(2.0, -0.5) == Matrix3.create_scale(Vector2(2.0, -0.5))


def test_matrix3_identity():
    assert Matrix3() == Matrix3.identity()
    assert Matrix3.identity()[0] == (1.0, 0.0, 0.0)
    assert not Matrix3.identity().is_close(TEST_MAT3)
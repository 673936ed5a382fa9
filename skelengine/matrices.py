"""Immutable 3x3 and 4x4 float matrices using the row-vector convention."""

from __future__ import annotations

import math
from typing import ClassVar, Iterable, Iterator, Sequence, TypeVar

from .scalar import DEFAULT_EPSILON, is_close_enough
from .vectors import Vector2, Vector3, Vector4

_M = TypeVar("_M", bound="_SquareMatrix")

Rows = tuple[tuple[float, ...], ...]


def _identity_rows(size: int) -> Rows:
    return tuple(
        tuple(1.0 if row == col else 0.0 for col in range(size)) for row in range(size)
    )


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


class _SquareMatrix:
    """Storage, comparison and element-wise helpers shared by the square matrices."""

    __slots__ = ("_rows",)

    SIZE: ClassVar[int]

    def __init__(self, rows: Iterable[Iterable[float]] | None = None) -> None:
        if rows is None:
            self._rows: Rows = _identity_rows(self.SIZE)
            return
        converted = tuple(tuple(float(v) for v in row) for row in rows)
        if len(converted) != self.SIZE or any(len(r) != self.SIZE for r in converted):
            raise ValueError(
                f"{type(self).__name__} needs {self.SIZE}x{self.SIZE} values"
            )
        self._rows = converted

    @property
    def rows(self) -> Rows:
        """The matrix as a tuple of row tuples."""
        return self._rows

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self._rows[index]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._rows))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(r) for r in self._rows]!r})"

    def _product(self: _M, other: object):
        if not isinstance(other, type(self)):
            return NotImplemented
        columns = tuple(zip(*other._rows))
        return type(self)(
            tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
            for row in self._rows
        )

    def _transpose(self: _M) -> _M:
        return type(self)(zip(*self._rows))

    def _close(self: _M, other: _M, epsilon: float) -> bool:
        return all(
            is_close_enough(a, b, epsilon)
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )


class Matrix3(_SquareMatrix):
    """A 3x3 matrix for 2D transforms."""

    __slots__ = ()
    SIZE = 3

    @classmethod
    def identity(cls) -> Matrix3:
        """The identity matrix."""
        return cls()

    def __mul__(self, other: Matrix3) -> Matrix3:
        """Matrix product (self * other)."""
        return self._product(other)

    def transposed(self) -> Matrix3:
        """The transpose of this matrix."""
        return self._transpose()

    def is_close(self, other: Matrix3, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if every element is close enough to the matching one in ``other``."""
        return self._close(other, epsilon)

    def transform_vector2(self, vec: Vector2, z: float = 0.0) -> Vector2:
        """Transform a 2D vector, using ``z`` as its third component."""
        m = self._rows
        return Vector2(
            vec.x * m[0][0] + vec.y * m[1][0] + z * m[2][0],
            vec.x * m[0][1] + vec.y * m[1][1] + z * m[2][1],
        )

    def transform_vector3(self, vec: Vector3) -> Vector3:
        """Transform a 3D vector."""
        m = self._rows
        return Vector3(
            vec.x * m[0][0] + vec.y * m[1][0] + vec.z * m[2][0],
            vec.x * m[0][1] + vec.y * m[1][1] + vec.z * m[2][1],
            vec.x * m[0][2] + vec.y * m[1][2] + vec.z * m[2][2],
        )

    @classmethod
    def create_scale(cls, x_scale, y_scale: float | None = None) -> Matrix3:
        """Scale matrix from a Vector2, a uniform factor, or separate x and y factors."""
        if isinstance(x_scale, Vector2):
            x_scale, y_scale = x_scale.x, x_scale.y
        elif y_scale is None:
            y_scale = x_scale
        return cls(((x_scale, 0.0, 0.0), (0.0, y_scale, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def create_rotation(cls, theta: float) -> Matrix3:
        """Rotation about the Z axis by ``theta`` radians."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def create_translation(cls, trans: Vector2) -> Matrix3:
        """Translation on the xy-plane."""
        return cls(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (trans.x, trans.y, 1.0)))


class Matrix4(_SquareMatrix):
    """A 4x4 matrix for 3D transforms."""

    __slots__ = ()
    SIZE = 4

    @classmethod
    def identity(cls) -> Matrix4:
        """The identity matrix."""
        return cls()

    def __mul__(self, other: Matrix4) -> Matrix4:
        """Matrix product (self * other)."""
        return self._product(other)

    def transposed(self) -> Matrix4:
        """The transpose of this matrix."""
        return self._transpose()

    def is_close(self, other: Matrix4, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if every element is close enough to the matching one in ``other``."""
        return self._close(other, epsilon)

    def inverted(self) -> Matrix4:
        """The inverse of this matrix; a singular matrix raises ZeroDivisionError."""
        m = self._rows

        def cofactor(row: int, col: int) -> float:
            minor = [
                [m[r][c] for c in range(4) if c != col] for r in range(4) if r != row
            ]
            sign = -1.0 if (row + col) % 2 else 1.0
            return sign * _det3(minor)

        cofactors = [[cofactor(r, c) for c in range(4)] for r in range(4)]
        det = sum(m[0][c] * cofactors[0][c] for c in range(4))
        inv_det = 1.0 / det
        return Matrix4(
            tuple(cofactors[c][r] * inv_det for c in range(4)) for r in range(4)
        )

    def translation(self) -> Vector3:
        """The translation component."""
        return Vector3(*self._rows[3][:3])

    def x_axis(self) -> Vector3:
        """The X axis (forward)."""
        return Vector3(*self._rows[0][:3])

    def y_axis(self) -> Vector3:
        """The Y axis (left)."""
        return Vector3(*self._rows[1][:3])

    def z_axis(self) -> Vector3:
        """The Z axis (up)."""
        return Vector3(*self._rows[2][:3])

    def scale(self) -> Vector3:
        """The scale component, the lengths of the three axis rows."""
        return Vector3(self.x_axis().length(), self.y_axis().length(), self.z_axis().length())

    def transform_vector3(self, vec: Vector3, w: float = 1.0) -> Vector3:
        """Transform a 3D vector with ``w`` as its fourth component (1 for points, 0 for directions)."""
        m = self._rows
        return Vector3(
            vec.x * m[0][0] + vec.y * m[1][0] + vec.z * m[2][0] + w * m[3][0],
            vec.x * m[0][1] + vec.y * m[1][1] + vec.z * m[2][1] + w * m[3][1],
            vec.x * m[0][2] + vec.y * m[1][2] + vec.z * m[2][2] + w * m[3][2],
        )

    def transform_vector4(self, vec: Vector4) -> Vector4:
        """Transform a 4D vector; only x, y and z are computed, w of the result is zero."""
        m = self._rows
        return Vector4(
            vec.x * m[0][0] + vec.y * m[1][0] + vec.z * m[2][0] + vec.w * m[3][0],
            vec.x * m[0][1] + vec.y * m[1][1] + vec.z * m[2][1] + vec.w * m[3][1],
            vec.x * m[0][2] + vec.y * m[1][2] + vec.z * m[2][2] + vec.w * m[3][2],
            0.0,
        )

    @classmethod
    def create_scale(
        cls, x_scale, y_scale: float | None = None, z_scale: float | None = None
    ) -> Matrix4:
        """Scale matrix from a Vector3, a uniform factor, or separate x, y and z factors."""
        if isinstance(x_scale, Vector3):
            x_scale, y_scale, z_scale = x_scale.x, x_scale.y, x_scale.z
        elif y_scale is None and z_scale is None:
            y_scale = z_scale = x_scale
        elif y_scale is None or z_scale is None:
            raise TypeError("create_scale needs one factor or all three")
        return cls(
            (
                (x_scale, 0.0, 0.0, 0.0),
                (0.0, y_scale, 0.0, 0.0),
                (0.0, 0.0, z_scale, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_rotation_x(cls, theta: float) -> Matrix4:
        """Rotation about the X axis by ``theta`` radians."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, c, s, 0.0),
                (0.0, -s, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_rotation_y(cls, theta: float) -> Matrix4:
        """Rotation about the Y axis by ``theta`` radians."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            (
                (c, 0.0, -s, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (s, 0.0, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_rotation_z(cls, theta: float) -> Matrix4:
        """Rotation about the Z axis by ``theta`` radians."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            (
                (c, s, 0.0, 0.0),
                (-s, c, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> Matrix4:
        """Roll about Z, then pitch about X, then yaw about Y."""
        return (
            cls.create_rotation_z(roll)
            * cls.create_rotation_x(pitch)
            * cls.create_rotation_y(yaw)
        )

    @classmethod
    def create_from_quaternion(cls, q) -> Matrix4:
        """Rotation matrix from any unit quaternion with x, y, z and w components."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return cls(
            (
                (
                    1.0 - 2.0 * y * y - 2.0 * z * z,
                    2.0 * x * y + 2.0 * w * z,
                    2.0 * x * z - 2.0 * w * y,
                    0.0,
                ),
                (
                    2.0 * x * y - 2.0 * w * z,
                    1.0 - 2.0 * x * x - 2.0 * z * z,
                    2.0 * y * z + 2.0 * w * x,
                    0.0,
                ),
                (
                    2.0 * x * z + 2.0 * w * y,
                    2.0 * y * z - 2.0 * w * x,
                    1.0 - 2.0 * x * x - 2.0 * y * y,
                    0.0,
                ),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_translation(cls, trans: Vector3) -> Matrix4:
        """Translation by ``trans``."""
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (trans.x, trans.y, trans.z, 1.0),
            )
        )

    @classmethod
    def create_look_at(cls, eye: Vector3, at: Vector3, up: Vector3) -> Matrix4:
        """Placement at ``eye`` facing ``at`` with ``up`` as the approximate up direction."""
        forward = (at - eye).normalized()
        left = up.cross(forward).normalized()
        new_up = forward.cross(left).normalized()
        return cls(
            (
                (left.x, left.y, left.z, 0.0),
                (new_up.x, new_up.y, new_up.z, 0.0),
                (forward.x, forward.y, forward.z, 0.0),
                (eye.x, eye.y, eye.z, 1.0),
            )
        )

    @classmethod
    def create_ortho(cls, width: float, height: float, near_z: float, far_z: float) -> Matrix4:
        """Orthographic projection."""
        return cls(
            (
                (2.0 / width, 0.0, 0.0, 0.0),
                (0.0, 2.0 / height, 0.0, 0.0),
                (0.0, 0.0, 1.0 / (far_z - near_z), 0.0),
                (0.0, 0.0, near_z / (near_z - far_z), 1.0),
            )
        )

    @classmethod
    def create_perspective_fov(
        cls, fov_y: float, width: float, height: float, near_z: float, far_z: float
    ) -> Matrix4:
        """Perspective projection with vertical field of view ``fov_y`` in radians."""
        y_scale = 1.0 / math.tan(fov_y / 2.0)
        x_scale = y_scale * height / width
        depth = far_z - near_z
        return cls(
            (
                (x_scale, 0.0, 0.0, 0.0),
                (0.0, y_scale, 0.0, 0.0),
                (0.0, 0.0, far_z / depth, 1.0),
                (0.0, 0.0, -near_z * far_z / depth, 0.0),
            )
        )
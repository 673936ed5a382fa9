"""Immutable unit quaternions for rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .matrices import Matrix4
from .scalar import DEFAULT_EPSILON, is_close_enough
from .vectors import Vector3

# Above this cosine two rotations count as collinear and slerp falls back to lerp.
_SLERP_LINEAR_THRESHOLD = 0.9999


@dataclass(frozen=True, slots=True)
class Quaternion:
    """A rotation quaternion; the default value is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    @classmethod
    def identity(cls) -> Quaternion:
        """The identity rotation."""
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis``, which must already be normalized."""
        scalar = math.sin(angle / 2.0)
        return cls(axis.x * scalar, axis.y * scalar, axis.z * scalar, math.cos(angle / 2.0))

    def conjugated(self) -> Quaternion:
        """The conjugate, with the vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def length_sq(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        """Length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> Quaternion:
        """Unit-length copy; a zero quaternion raises ZeroDivisionError."""
        length = self.length()
        return Quaternion(self.x / length, self.y / length, self.z / length, self.w / length)

    def dot(self, other: Quaternion) -> float:
        """Four-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def lerp(self, other: Quaternion, f: float) -> Quaternion:
        """Normalized linear interpolation along the shorter arc."""
        bias = 1.0 if self.dot(other) >= 0.0 else -1.0
        weight = bias * (1.0 - f)
        return Quaternion(
            *(b * f + a * weight for a, b in zip(self, other))
        ).normalized()

    def slerp(self, other: Quaternion, f: float) -> Quaternion:
        """Spherical linear interpolation along the shorter arc."""
        raw_cos = self.dot(other)
        cos_omega = raw_cos if raw_cos >= 0.0 else -raw_cos
        if cos_omega < _SLERP_LINEAR_THRESHOLD:
            omega = math.acos(cos_omega)
            inv_sin = 1.0 / math.sin(omega)
            scale0 = math.sin((1.0 - f) * omega) * inv_sin
            scale1 = math.sin(f * omega) * inv_sin
        else:
            scale0 = 1.0 - f
            scale1 = f
        if raw_cos < 0.0:
            scale1 = -scale1
        return Quaternion(
            *(scale0 * a + scale1 * b for a, b in zip(self, other))
        ).normalized()

    def concatenate(self, other: Quaternion) -> Quaternion:
        """Rotation by this quaternion followed by ``other``."""
        qv = Vector3(self.x, self.y, self.z)
        pv = Vector3(other.x, other.y, other.z)
        vec = other.w * qv + self.w * pv + pv.cross(qv)
        return Quaternion(vec.x, vec.y, vec.z, other.w * self.w - pv.dot(qv))

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate the vector ``v`` by this quaternion."""
        qv = Vector3(self.x, self.y, self.z)
        return v + 2.0 * qv.cross(qv.cross(v) + self.w * v)

    def to_matrix(self) -> Matrix4:
        """The equivalent rotation matrix."""
        return Matrix4.create_from_quaternion(self)

    def is_close(self, other: Quaternion, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if every component is close enough to the matching one in ``other``."""
        return all(is_close_enough(a, b, epsilon) for a, b in zip(self, other))
"""A bone's local rotation and translation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .matrices import Matrix4
from .quaternion import Quaternion
from .vectors import Vector3


@dataclass(frozen=True, slots=True)
class BoneTransform:
    """Rotation followed by translation, relative to the bone's parent."""

    rot: Quaternion = field(default_factory=Quaternion)
    pos: Vector3 = field(default_factory=Vector3)

    def to_matrix(self) -> Matrix4:
        """The transform as a matrix: rotation, then translation."""
        return Matrix4.create_from_quaternion(self.rot) * Matrix4.create_translation(self.pos)

    @classmethod
    def interpolate(cls, a: BoneTransform, b: BoneTransform, f: float) -> BoneTransform:
        """Blend from ``a`` to ``b`` by ``f``: lerp on position, slerp on rotation."""
        return cls(rot=a.rot.slerp(b.rot, f), pos=a.pos.lerp(b.pos, f))
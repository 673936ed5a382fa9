"""Immutable 2, 3 and 4 component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real
from typing import Callable, ClassVar, Iterator, TypeVar

from .scalar import DEFAULT_EPSILON, is_close_enough

_V = TypeVar("_V", bound="_Vector")


class _Vector:
    """Component iteration shared by the concrete vector types."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))


def _pairwise(a: _V, b: object, op: Callable[[float, float], float]):
    if not isinstance(b, type(a)):
        return NotImplemented
    return type(a)(*(op(x, y) for x, y in zip(a, b)))


def _multiply(vec: _V, other: object):
    if isinstance(other, type(vec)):
        return type(vec)(*(a * b for a, b in zip(vec, other)))
    if isinstance(other, Real):
        return type(vec)(*(a * other for a in vec))
    return NotImplemented


def _rmultiply(vec: _V, other: object):
    if isinstance(other, Real):
        return type(vec)(*(other * a for a in vec))
    return NotImplemented


def _divide(vec: _V, scalar: object):
    if not isinstance(scalar, Real):
        return NotImplemented
    return type(vec)(*(a / scalar for a in vec))


def _length_sq(vec: _Vector) -> float:
    return sum(c * c for c in vec)


def _dot(a: _Vector, b: _Vector) -> float:
    return sum(x * y for x, y in zip(a, b))


def _is_close(a: _Vector, b: _Vector, epsilon: float) -> bool:
    return all(is_close_enough(x, y, epsilon) for x, y in zip(a, b))


@dataclass(frozen=True, slots=True)
class Vector2(_Vector):
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    UNIT_X: ClassVar[Vector2]
    UNIT_Y: ClassVar[Vector2]

    def __add__(self, other: Vector2) -> Vector2:
        return _pairwise(self, other, lambda a, b: a + b)

    def __sub__(self, other: Vector2) -> Vector2:
        return _pairwise(self, other, lambda a, b: a - b)

    def __mul__(self, other) -> Vector2:
        """Component-wise product with a vector, or scaling by a number."""
        return _multiply(self, other)

    def __rmul__(self, other) -> Vector2:
        return _rmultiply(self, other)

    def __truediv__(self, scalar) -> Vector2:
        return _divide(self, scalar)

    def length_sq(self) -> float:
        """Squared Euclidean length."""
        return _length_sq(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return _dot(self, other)

    def lerp(self, other: Vector2, f: float) -> Vector2:
        """Linear interpolation from this vector to ``other`` by ``f``."""
        return self + (other - self) * f

    def is_close(self, other: Vector2, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if every component is close enough to the matching one in ``other``."""
        return _is_close(self, other, epsilon)


@dataclass(frozen=True, slots=True)
class Vector3(_Vector):
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    UNIT_X: ClassVar[Vector3]
    UNIT_Y: ClassVar[Vector3]
    UNIT_Z: ClassVar[Vector3]

    def __add__(self, other: Vector3) -> Vector3:
        return _pairwise(self, other, lambda a, b: a + b)

    def __sub__(self, other: Vector3) -> Vector3:
        return _pairwise(self, other, lambda a, b: a - b)

    def __mul__(self, other) -> Vector3:
        """Component-wise product with a vector, or scaling by a number."""
        return _multiply(self, other)

    def __rmul__(self, other) -> Vector3:
        return _rmultiply(self, other)

    def __truediv__(self, scalar) -> Vector3:
        return _divide(self, scalar)

    def length_sq(self) -> float:
        """Squared Euclidean length."""
        return _length_sq(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return _dot(self, other)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product (self x other)."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def lerp(self, other: Vector3, f: float) -> Vector3:
        """Linear interpolation from this vector to ``other`` by ``f``."""
        return self + (other - self) * f

    def is_close(self, other: Vector3, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if every component is close enough to the matching one in ``other``."""
        return _is_close(self, other, epsilon)


@dataclass(frozen=True, slots=True)
class Vector4(_Vector):
    """A 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    ZERO: ClassVar[Vector4]
    ONE: ClassVar[Vector4]
    UNIT_X: ClassVar[Vector4]
    UNIT_Y: ClassVar[Vector4]
    UNIT_Z: ClassVar[Vector4]
    UNIT_W: ClassVar[Vector4]

    def __add__(self, other: Vector4) -> Vector4:
        return _pairwise(self, other, lambda a, b: a + b)

    def __sub__(self, other: Vector4) -> Vector4:
        return _pairwise(self, other, lambda a, b: a - b)

    def __mul__(self, other) -> Vector4:
        """Component-wise product with a vector, or scaling by a number."""
        return _multiply(self, other)

    def __rmul__(self, other) -> Vector4:
        return _rmultiply(self, other)

    def __truediv__(self, scalar) -> Vector4:
        return _divide(self, scalar)

    def length_sq(self) -> float:
        """Squared Euclidean length."""
        return _length_sq(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector4:
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def dot(self, other: Vector4) -> float:
        """Dot product."""
        return _dot(self, other)

    def lerp(self, other: Vector4, f: float) -> Vector4:
        """Linear interpolation from this vector to ``other`` by ``f``."""
        return self + (other - self) * f

    def is_close(self, other: Vector4, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if every component is close enough to the matching one in ``other``."""
        return _is_close(self, other, epsilon)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)

Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)

Vector4.ZERO = Vector4(0.0, 0.0, 0.0, 0.0)
Vector4.ONE = Vector4(1.0, 1.0, 1.0, 1.0)
Vector4.UNIT_X = Vector4(1.0, 0.0, 0.0, 0.0)
Vector4.UNIT_Y = Vector4(0.0, 1.0, 0.0, 0.0)
Vector4.UNIT_Z = Vector4(0.0, 0.0, 1.0, 0.0)
Vector4.UNIT_W = Vector4(0.0, 0.0, 0.0, 1.0)
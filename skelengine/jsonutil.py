"""Typed property lookups on parsed JSON objects."""

from __future__ import annotations

from typing import Any, Mapping

from .quaternion import Quaternion
from .vectors import Vector3

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1


class AssetFormatError(ValueError):
    """An asset document lacks a property or holds one of the wrong type."""


def _is_double(value: Any) -> bool:
    return isinstance(value, float)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _lookup(obj: Any, key: str) -> Any:
    if not isinstance(obj, Mapping):
        raise AssetFormatError(f"cannot look up {key!r}: not a JSON object")
    try:
        return obj[key]
    except KeyError:
        raise AssetFormatError(f"missing property {key!r}") from None


def get_float(obj: Mapping[str, Any], key: str) -> float:
    """The floating-point value of ``key``; integers written without a fraction are rejected."""
    value = _lookup(obj, key)
    if not _is_double(value):
        raise AssetFormatError(f"property {key!r} is not a floating-point number")
    return value


def get_int(obj: Mapping[str, Any], key: str) -> int:
    """The 32-bit signed integer value of ``key``."""
    value = _lookup(obj, key)
    if not _is_int(value) or not _INT_MIN <= value <= _INT_MAX:
        raise AssetFormatError(f"property {key!r} is not a 32-bit integer")
    return value


def get_uint(obj: Mapping[str, Any], key: str) -> int:
    """The 32-bit unsigned integer value of ``key``."""
    value = _lookup(obj, key)
    if not _is_int(value) or not 0 <= value <= _UINT_MAX:
        raise AssetFormatError(f"property {key!r} is not a 32-bit unsigned integer")
    return value


def get_string(obj: Mapping[str, Any], key: str) -> str:
    """The string value of ``key``."""
    value = _lookup(obj, key)
    if not isinstance(value, str):
        raise AssetFormatError(f"property {key!r} is not a string")
    return value


def get_bool(obj: Mapping[str, Any], key: str) -> bool:
    """The boolean value of ``key``."""
    value = _lookup(obj, key)
    if not isinstance(value, bool):
        raise AssetFormatError(f"property {key!r} is not a boolean")
    return value


def get_vector3(obj: Mapping[str, Any], key: str) -> Vector3:
    """A Vector3 from an array of exactly three floating-point numbers."""
    value = _lookup(obj, key)
    if not isinstance(value, list) or len(value) != 3:
        raise AssetFormatError(f"property {key!r} is not an array of three numbers")
    if not all(_is_double(v) for v in value):
        raise AssetFormatError(f"property {key!r} holds a non floating-point element")
    return Vector3(*value)


def get_quaternion(obj: Mapping[str, Any], key: str) -> Quaternion:
    """A Quaternion from the first four floating-point numbers of an array (x, y, z, w)."""
    value = _lookup(obj, key)
    if not isinstance(value, list) or len(value) < 4:
        raise AssetFormatError(f"property {key!r} is not an array of four numbers")
    components = value[:4]
    if not all(_is_double(v) for v in components):
        raise AssetFormatError(f"property {key!r} holds a non floating-point element")
    return Quaternion(*components)


def find_object(obj: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    """The nested object under ``key``, or None if it is absent or not an object."""
    if not isinstance(obj, Mapping):
        return None
    value = obj.get(key)
    return value if isinstance(value, Mapping) else None
"""3D vector, matrix and quaternion math with skeleton and animation assets read from JSON."""

__version__ = "0.1.0"

__all__ = [
    "scalar",
    "vectors",
    "matrices",
    "quaternion",
    "jsonutil",
    "bonetransform",
    "skeleton",
    "animation",
]
"""3D vector primitives.

Every function accepts length-3 sequences or arrays and computes in the
build-level dtype ``FLOAT``.
"""

from __future__ import annotations

import numpy as np

from .config import FLOAT


class DegenerateGeometryError(ValueError):
    """Raised when coincident or collinear points leave an angle undefined."""


def as_vector(v) -> np.ndarray:
    """Coerce ``v`` to a 1-D array of three ``FLOAT`` values."""
    arr = np.asarray(v, dtype=FLOAT)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3D vector, got shape {arr.shape}")
    return arr


def subtract(p, q) -> np.ndarray:
    """Vector from point p to point q (q - p)."""
    return as_vector(q) - as_vector(p)


def dot(a, b):
    """Dot product a . b."""
    return FLOAT(np.dot(as_vector(a), as_vector(b)))


def cross(a, b) -> np.ndarray:
    """Right-handed cross product a x b."""
    return np.cross(as_vector(a), as_vector(b))


def norm(v):
    """Euclidean length of v."""
    return FLOAT(np.sqrt(dot(v, v)))


def normalize(v) -> np.ndarray:
    """Unit vector along v.

    Raises
    ------
    DegenerateGeometryError
        If v has zero length.
    """
    v = as_vector(v)
    n = norm(v)
    if n == 0:
        raise DegenerateGeometryError("Cannot normalize a zero-length vector")
    return v / n

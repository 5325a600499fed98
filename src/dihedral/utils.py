"""Caller-side helpers: reading point traces and windowing them into torsions."""

from __future__ import annotations

import logging
from typing import Iterator, List

import numpy as np

from .config import DEFAULT_PARAMS, FLOAT
from .geometry import dihedral, dihedral_unsigned

logger = logging.getLogger(__name__)


def read_points(path: str) -> np.ndarray:
    """
    Read a plain-text trace of 3D points, one ``x y z`` row per line.
    Blank lines and ``#`` comments are ignored. Returns an (N, 3) array.
    """
    try:
        points = np.loadtxt(path, dtype=FLOAT, comments="#", ndmin=2)
    except ValueError as e:
        raise ValueError(f"{path}: invalid coordinates") from e

    if points.size == 0:
        return np.empty((0, 3), dtype=FLOAT)
    if points.shape[1] != 3:
        raise ValueError(f"{path}: expected 3 columns per row, found {points.shape[1]}")
    if not np.all(np.isfinite(points)):
        raise ValueError(f"{path}: coordinates must be finite")

    logger.debug("Read %d points from %s", len(points), path)
    return points


def iter_windows(points, size: int = DEFAULT_PARAMS["window"]) -> Iterator[np.ndarray]:
    """Yield overlapping windows ``points[i:i + size]`` over a point trace."""
    pts = np.asarray(points, dtype=FLOAT)
    for i in range(len(pts) - size + 1):
        yield pts[i:i + size]


def torsion_series(points, signed: bool = True) -> List[float]:
    """
    Dihedral angle (radians) of every run of four consecutive points.

    Each window is an independent call to dihedral() or dihedral_unsigned(),
    so a trace of N points gives N - 3 angles. Degenerate windows raise
    DegenerateGeometryError.
    """
    fn = dihedral if signed else dihedral_unsigned
    return [fn(frame) for frame in iter_windows(points)]

"""Dihedral (torsion) angles from four ordered points.

All functions are stateless and return angles in radians.

References
----------
- https://math.stackexchange.com/a/47084
- https://en.wikipedia.org/wiki/Dihedral_angle#In_stereochemistry
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .config import DEFAULT_THRESHOLDS, FLOAT
from .config_classes import GeometryThresholds
from .vectors import DegenerateGeometryError, cross, dot, norm, normalize, subtract

logger = logging.getLogger(__name__)


def _as_quadruple(points) -> np.ndarray:
    """Validate and convert four ordered points to a (4, 3) array."""
    pts = np.asarray(points, dtype=FLOAT)
    if pts.shape != (4, 3):
        raise ValueError(f"Expected four 3D points (shape (4, 3)), got shape {pts.shape}")
    if not np.all(np.isfinite(pts)):
        raise ValueError("Point coordinates must be finite")
    return pts


def _edges_and_normals(
    points, thresholds: GeometryThresholds
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the central edge and the two plane normals, rejecting degenerate input.

    Each edge is divided by its largest absolute component before any product
    is taken, so coordinates near the float limits neither overflow nor
    underflow. The angle does not depend on edge lengths.

    Returns
    -------
    tuple
        (b, n1, n2) with b along p2 - p1, n1 along (p1 - p0) x b and n2 along b x (p3 - p2).
    """
    p0, p1, p2, p3 = _as_quadruple(points)

    edges, lengths = [], []
    for i, edge in enumerate((subtract(p0, p1), subtract(p1, p2), subtract(p2, p3))):
        if not np.all(np.isfinite(edge)):
            raise ValueError(f"Distance between points {i} and {i + 1} overflows")
        scale = np.max(np.abs(edge))
        if scale == 0 or scale * norm(edge / scale) <= thresholds.min_length:
            logger.debug("Degenerate dihedral: edge %d has scale %.3g", i, scale)
            raise DegenerateGeometryError(f"Points {i} and {i + 1} coincide")
        edges.append(edge / scale)
        lengths.append(norm(edges[-1]))

    a, b, c = edges
    n1, n2 = cross(a, b), cross(b, c)

    # |u x v| / (|u| |v|) is the sine of the angle between consecutive edges
    for i, normal in enumerate((n1, n2)):
        sine = norm(normal) / (lengths[i] * lengths[i + 1])
        if sine <= thresholds.min_sine:
            logger.debug("Degenerate dihedral: points %d-%d collinear (sin=%.3g)", i, i + 2, sine)
            raise DegenerateGeometryError(f"Points {i}, {i + 1} and {i + 2} are collinear")

    return b, n1, n2


def dihedral(points, thresholds: GeometryThresholds = DEFAULT_THRESHOLDS) -> float:
    """Signed dihedral angle of four ordered points, in the range (-pi, pi].

    Follows the biochemistry convention: looking along p1 -> p2, a positive
    angle is a counter-clockwise rotation of the p2-p3 bond relative to the
    p0-p1 bond. Reading the points in reverse order gives the same angle;
    the mirror image of the four points gives the negated angle.

    Parameters
    ----------
    points : array-like, shape (4, 3)
        Ordered coordinates p0, p1, p2, p3.
    thresholds : GeometryThresholds
        Limits below which the geometry counts as degenerate.

    Returns
    -------
    float
        Angle in radians.

    Raises
    ------
    DegenerateGeometryError
        If two consecutive points coincide or three consecutive points are collinear.
    ValueError
        If the input is not four finite 3D points.

    Examples
    --------
    >>> P0 = (24.969, 13.428, 30.692)  # N
    >>> P1 = (24.044, 12.661, 29.808)  # CA
    >>> P2 = (22.785, 13.482, 29.543)  # C
    >>> P3 = (21.951, 13.670, 30.431)  # O
    >>> round(float(np.degrees(dihedral([P0, P1, P2, P3]))), 2)
    -71.22
    """
    b, n1, n2 = _edges_and_normals(points, thresholds)
    r, s = normalize(n1), normalize(n2)
    m = cross(r, normalize(b))
    x, y = dot(r, s), dot(s, m)

    # + 0.0 turns the -0.0 of an exact cis geometry into 0.0
    angle = -np.arctan2(y, x) + FLOAT(0.0)
    # atan2 returns +pi for an exact trans geometry, which negates out of range
    if angle <= -np.pi:
        angle = FLOAT(np.pi)
    return float(angle)


def dihedral_unsigned(points, thresholds: GeometryThresholds = DEFAULT_THRESHOLDS) -> float:
    """Unsigned dihedral angle of four ordered points, in the range [0, pi].

    Ignores the direction of rotation and is cheaper than dihedral(). The
    cosine is clipped to [-1, 1] so rounding cannot turn an exact 0 or pi
    geometry into NaN.

    Parameters
    ----------
    points : array-like, shape (4, 3)
        Ordered coordinates p0, p1, p2, p3.
    thresholds : GeometryThresholds
        Limits below which the geometry counts as degenerate.

    Returns
    -------
    float
        Angle in radians.

    Raises
    ------
    DegenerateGeometryError
        If two consecutive points coincide or three consecutive points are collinear.
    ValueError
        If the input is not four finite 3D points.
    """
    _, n1, n2 = _edges_and_normals(points, thresholds)
    cos_angle = np.clip(dot(n1, n2) / (norm(n1) * norm(n2)), -1.0, 1.0)
    return float(np.arccos(cos_angle))

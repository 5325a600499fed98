"""Type-safe configuration dataclasses for dihedral calculations.

Inline docs explain what each threshold controls and its typical range.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class GeometryThresholds:
    """Thresholds for detecting degenerate four-point geometries.

    Default values suit double precision. Use for_dtype() to get values
    matched to the floating-point width the package was built with.
    """

    min_length: float = 0.0
    """Edges at or below this length (same unit as the coordinates) are coincident points."""

    min_sine: float = 1e-10
    """Min sin(bond angle), i.e. |a x b| / (|a| |b|). At or below, three points are collinear."""

    @classmethod
    def for_dtype(cls, dtype) -> "GeometryThresholds":
        """Thresholds scaled to the resolution of ``dtype``."""
        if np.finfo(dtype).bits <= 32:
            return cls(min_sine=1e-5)
        return cls()

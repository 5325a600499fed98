from importlib.metadata import version
__version__ = version("dihedral")

# Build-level precision and defaults
from .config import FLOAT, DEFAULT_PARAMS, DEFAULT_THRESHOLDS
from .config_classes import GeometryThresholds

# Main interfaces
from .geometry import dihedral, dihedral_unsigned

# Primitives
from .vectors import DegenerateGeometryError, cross, dot, norm, normalize, subtract

# Utilities
from .utils import iter_windows, read_points, torsion_series

__all__ = [
    # Main interfaces
    'dihedral',
    'dihedral_unsigned',
    'DegenerateGeometryError',

    # Vector primitives
    'subtract',
    'dot',
    'cross',
    'norm',
    'normalize',

    # Utilities
    'read_points',
    'iter_windows',
    'torsion_series',

    # Configuration
    'FLOAT',
    'DEFAULT_PARAMS',
    'DEFAULT_THRESHOLDS',
    'GeometryThresholds',
]

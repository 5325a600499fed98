"""Build-level settings and CLI defaults.

FLOAT selects the floating-point width used by every calculation in the
package. It is fixed here, at build time; switch it to ``np.float32`` for
single precision.
"""

import numpy as np

from .config_classes import GeometryThresholds

FLOAT = np.float64

DEFAULT_THRESHOLDS = GeometryThresholds.for_dtype(FLOAT)

DEFAULT_PARAMS = {
    "unsigned": False,
    "degrees": False,
    "window": 4,
    "precision": np.dtype(FLOAT).name,
}

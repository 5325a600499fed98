"""Tests for threshold dataclasses and build-level settings."""

import dataclasses

import numpy as np
import pytest

from dihedral.config import DEFAULT_PARAMS, DEFAULT_THRESHOLDS, FLOAT
from dihedral.config_classes import GeometryThresholds


def test_thresholds_scale_with_precision():
    """A looser min_sine is the only difference between float32 and float64."""
    assert GeometryThresholds.for_dtype(np.float32) == GeometryThresholds(min_sine=1e-5)


def test_single_precision_more_permissive():
    """float32 thresholds tolerate more rounding than float64."""
    single = GeometryThresholds.for_dtype(np.float32)
    double = GeometryThresholds.for_dtype(np.float64)
    assert single.min_sine > double.min_sine
    assert double == GeometryThresholds()


def test_thresholds_frozen():
    """Thresholds cannot be changed after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_THRESHOLDS.min_sine = 0.5


def test_defaults_match_build_precision():
    """Package defaults are derived from FLOAT."""
    assert DEFAULT_THRESHOLDS == GeometryThresholds.for_dtype(FLOAT)
    assert DEFAULT_PARAMS["precision"] == np.dtype(FLOAT).name
    assert DEFAULT_PARAMS["window"] == 4

"""Inverse-distance-weighted interpolation of point samples onto H3 hex cells."""

from hexinterp.core.errors import InterpolationConfigError
from hexinterp.interpolator import HexInterpolator, InterpolationState
from hexinterp.models import CellResult, InterpolationConfig, Sample, samples_from_records

__version__ = "0.1.0"

__all__ = [
    "CellResult",
    "HexInterpolator",
    "InterpolationConfig",
    "InterpolationConfigError",
    "InterpolationState",
    "Sample",
    "samples_from_records",
]

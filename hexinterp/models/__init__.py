from hexinterp.models.config import InterpolationConfig
from hexinterp.models.sample import CellResult, Sample, samples_from_records

__all__ = [
    "CellResult",
    "InterpolationConfig",
    "Sample",
    "samples_from_records",
]

"""Inverse distance weighting over ring distances."""

from hexinterp.pipeline.aggregation import CellAccumulator

# Offset keeps the origin ring (distance 0) finite
DISTANCE_OFFSET = 0.5


def idw_weight(distance: int, power: float) -> float:
    """Weight of a contribution ``distance`` rings away: 1 / (d + 0.5)^power."""
    return 1.0 / (distance + DISTANCE_OFFSET) ** power


def estimate_value(accumulator: CellAccumulator, power: float) -> float:
    """Weighted mean of every contribution, across all ring distances.

    Non-finite sample values are not filtered and propagate into the result.
    """
    numerator = 0.0
    denominator = 0.0
    for distance, value in accumulator.items():
        weight = idw_weight(distance, power)
        numerator += value * weight
        denominator += weight
    return numerator / denominator

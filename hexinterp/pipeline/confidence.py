"""Confidence scoring from the distance to the nearest contributing sample.

The curve is a straight line through two calibration points, raised to
``confidence_power``:

    (draw_ring_radius,  min_confidence ** (1 / confidence_power))
    (confidence_radius, 1)

so confidence is exactly ``min_confidence`` at the draw radius and exactly 1
at the confidence radius. Cells farther than the draw radius get the -1
sentinel and are dropped by the interpolator.
"""

from __future__ import annotations

from typing import Callable

from hexinterp.core.errors import InterpolationConfigError

EXCLUDED = -1.0


def linear_function_from_two_points(
    x1: float, y1: float, x2: float, y2: float
) -> Callable[[float], float]:
    """Return the line through (x1, y1) and (x2, y2)."""
    if x1 == x2:
        raise InterpolationConfigError(
            f"cannot fit a line through two points with the same x ({x1})"
        )
    slope = (y2 - y1) / (x2 - x1)
    return lambda x: slope * (x - x1) + y1


class ConfidenceCurve:
    """Maps the minimum ring distance of a cell to a confidence score."""

    def __init__(
        self,
        draw_ring_radius: int,
        min_confidence: float,
        confidence_radius: int,
        confidence_power: float,
        saturate: bool = True,
    ):
        self.draw_ring_radius = draw_ring_radius
        self.confidence_radius = confidence_radius
        self.confidence_power = confidence_power
        self.saturate = saturate
        self._line = linear_function_from_two_points(
            draw_ring_radius,
            min_confidence ** (1 / confidence_power),
            confidence_radius,
            1.0,
        )

    def __call__(self, min_distance: int | None) -> float:
        if min_distance is None or min_distance > self.draw_ring_radius:
            return EXCLUDED
        if self.saturate and min_distance <= self.confidence_radius:
            return 1.0
        # Without saturation the line extrapolates past 1 inside confidence_radius
        base = self._line(min_distance)
        if base < 0 and not float(self.confidence_power).is_integer():
            return EXCLUDED
        return base ** self.confidence_power

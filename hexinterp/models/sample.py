"""Input samples and per-cell interpolation results.

A Sample is one geolocated scalar reading. A CellResult is what the
interpolator emits for a covered H3 cell: the IDW estimate plus a confidence
score in (0, 1] that a renderer typically maps to opacity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable


@dataclass(frozen=True)
class Sample:
    """A single known value at a (longitude, latitude) position, in degrees."""

    longitude: float
    latitude: float
    value: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)


@dataclass(frozen=True)
class CellResult:
    """Interpolated value and confidence for a single H3 cell."""

    cell_id: str
    value: float
    confidence: float

    def as_dict(self) -> dict[str, Any]:
        return {
            "coordinate": self.cell_id,
            "value": self.value,
            "confidence": self.confidence,
        }


def samples_from_records(
    records: Iterable[Any],
    get_position: Callable[[Any], tuple[float, float]],
    get_value: Callable[[Any], float],
) -> list[Sample]:
    """Convert arbitrary records into Samples using accessor callables.

    Args:
        records: Any iterable of input records (dicts, rows, objects).
        get_position: Returns ``(longitude, latitude)`` for a record.
        get_value: Returns the scalar value for a record.

    Returns:
        One Sample per record, in input order.
    """
    samples: list[Sample] = []
    for record in records:
        longitude, latitude = get_position(record)
        samples.append(
            Sample(
                longitude=float(longitude),
                latitude=float(latitude),
                value=float(get_value(record)),
            )
        )
    return samples

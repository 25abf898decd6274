"""Expand every sample over its surrounding H3 rings and bucket values per cell.

Each cell keeps one list of contributing values per ring distance. A cell may
collect values at several distances when it sits inside the rings of more
than one sample.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from hexinterp.models.sample import Sample
from hexinterp.pipeline.h3_grid import position_to_cell, rings_by_distance

logger = logging.getLogger(__name__)


@dataclass
class CellAccumulator:
    """Sample values reaching one cell, keyed by ring distance.

    Distances with no contributions are absent rather than mapped to an
    empty list.
    """

    contributions: dict[int, list[float]] = field(default_factory=dict)

    def add(self, distance: int, value: float) -> None:
        self.contributions.setdefault(distance, []).append(value)

    @property
    def min_distance(self) -> int | None:
        if not self.contributions:
            return None
        return min(self.contributions)

    def items(self) -> Iterator[tuple[int, float]]:
        """Yield every (distance, value) contribution."""
        for distance, values in self.contributions.items():
            for value in values:
                yield distance, value

    def merge(self, other: CellAccumulator) -> None:
        """Fold another accumulator for the same cell into this one."""
        for distance, values in other.contributions.items():
            if values:
                self.contributions.setdefault(distance, []).extend(values)

    def __len__(self) -> int:
        return sum(len(values) for values in self.contributions.values())


def aggregate_samples(
    samples: Sequence[Sample],
    resolution: int,
    ring_radius: int,
) -> dict[str, CellAccumulator]:
    """Build the per-cell accumulators for a full sample set.

    Args:
        samples: Known values to spread over the grid.
        resolution: H3 resolution of the origin cells.
        ring_radius: Largest ring distance a sample contributes to.

    Returns:
        Mapping of H3 cell → CellAccumulator for every cell reached by at
        least one sample.
    """
    cells: dict[str, CellAccumulator] = defaultdict(CellAccumulator)

    for sample in samples:
        origin = position_to_cell(sample.longitude, sample.latitude, resolution)
        for distance, ring in rings_by_distance(origin, ring_radius):
            for cell in ring:
                cells[cell].add(distance, sample.value)

    logger.debug(
        "Aggregated %d samples into %d H3 cells (res %d, radius %d)",
        len(samples),
        len(cells),
        resolution,
        ring_radius,
    )
    return dict(cells)


def merge_accumulators(
    partials: Sequence[dict[str, CellAccumulator]],
) -> dict[str, CellAccumulator]:
    """Merge-reduce partial aggregations built over disjoint sample subsets."""
    merged: dict[str, CellAccumulator] = defaultdict(CellAccumulator)
    for partial in partials:
        for cell, accumulator in partial.items():
            merged[cell].merge(accumulator)
    return dict(merged)

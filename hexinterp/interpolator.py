"""Hex-grid IDW interpolator.

This module:
1. Spreads each sample over the H3 rings around its origin cell.
2. Estimates every reached cell's value by inverse distance weighting over
   ring distance, using all contributions at all distances.
3. Scores confidence from the distance to the nearest contributing sample.
4. Keeps only cells with positive confidence (inside the draw radius).

Results are rebuilt from scratch for every sample set; nothing is cached
between ``compute`` calls.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Sequence

from hexinterp.core.config import Settings
from hexinterp.core.config import settings as default_settings
from hexinterp.models.config import InterpolationConfig
from hexinterp.models.sample import CellResult, Sample
from hexinterp.pipeline.aggregation import aggregate_samples
from hexinterp.pipeline.confidence import ConfidenceCurve
from hexinterp.pipeline.idw import estimate_value

logger = logging.getLogger(__name__)


class HexInterpolator:
    """Turns a list of samples into per-cell value and confidence estimates."""

    def __init__(self, config: InterpolationConfig | None = None):
        self.config = config or InterpolationConfig.from_settings(default_settings)
        self._confidence = ConfidenceCurve(
            draw_ring_radius=self.config.draw_ring_radius,
            min_confidence=self.config.min_confidence,
            confidence_radius=self.config.confidence_radius,
            confidence_power=self.config.confidence_power,
            saturate=self.config.saturate_confidence,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> HexInterpolator:
        return cls(InterpolationConfig.from_settings(settings))

    def compute(self, samples: Sequence[Sample]) -> dict[str, CellResult]:
        """Interpolate a sample set onto the H3 grid.

        Args:
            samples: Known values. May be empty.

        Returns:
            Mapping of H3 cell → CellResult for every cell within
            ``draw_ring_radius`` rings of at least one sample.
        """
        accumulators = aggregate_samples(
            samples,
            self.config.hex_resolution,
            self.config.interpolation_ring_radius,
        )

        results: dict[str, CellResult] = {}
        for cell, accumulator in accumulators.items():
            confidence = self._confidence(accumulator.min_distance)
            if confidence <= 0:
                continue
            results[cell] = CellResult(
                cell_id=cell,
                value=estimate_value(accumulator, self.config.idw_power),
                confidence=confidence,
            )

        logger.info(
            "Interpolated %d samples onto %d H3 cells (%d reached, res %d)",
            len(samples),
            len(results),
            len(accumulators),
            self.config.hex_resolution,
        )
        return results


class InterpolationState:
    """Holds the latest interpolation result and recomputes it on input change.

    A new sample sequence is detected by identity, not by content: passing
    the same list object again is a no-op. The result mapping is replaced as
    a whole once computation finishes, so readers never see a partial result.
    When updates overlap, only the most recently started one is swapped in.
    """

    def __init__(self, interpolator: HexInterpolator | None = None):
        self.interpolator = interpolator or HexInterpolator()
        self._lock = threading.Lock()
        self._samples: Sequence[Sample] | None = None
        self._results: dict[str, CellResult] = {}
        self._generation = 0

    @property
    def results(self) -> dict[str, CellResult]:
        with self._lock:
            return self._results

    def update(self, samples: Sequence[Sample]) -> bool:
        """Recompute if ``samples`` is a different sequence than last time.

        Returns:
            True if a new result was computed and swapped in. False if the
            sequence was unchanged or a newer update started meanwhile.
        """
        with self._lock:
            if samples is self._samples:
                return False
            self._generation += 1
            generation = self._generation

        results = self.interpolator.compute(samples)

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale interpolation result (generation %d)", generation)
                return False
            self._samples = samples
            self._results = results
        return True

    def records(self) -> list[dict[str, Any]]:
        """Current results as plain dicts, one per cell."""
        return [result.as_dict() for result in self.results.values()]

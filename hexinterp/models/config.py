"""Validated, immutable configuration for the hex interpolator."""

from __future__ import annotations

from dataclasses import dataclass

from hexinterp.core.config import Settings
from hexinterp.core.errors import InterpolationConfigError

MAX_H3_RESOLUTION = 15


@dataclass(frozen=True)
class InterpolationConfig:
    """Construction-time constants for HexInterpolator.

    Every combination that cannot yield a meaningful result is rejected here,
    so that ``compute`` never has to check its configuration.
    """

    hex_resolution: int = 7
    interpolation_ring_radius: int = 12
    draw_ring_radius: int = 6
    idw_power: float = 3.0
    min_confidence: float = 0.25
    confidence_radius: int = 4
    confidence_power: float = 1.0
    saturate_confidence: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.hex_resolution <= MAX_H3_RESOLUTION:
            raise InterpolationConfigError(
                f"hex_resolution must be in 0..{MAX_H3_RESOLUTION}, got {self.hex_resolution}"
            )
        for name in ("interpolation_ring_radius", "draw_ring_radius", "confidence_radius"):
            if getattr(self, name) < 0:
                raise InterpolationConfigError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.draw_ring_radius > self.interpolation_ring_radius:
            raise InterpolationConfigError(
                f"draw_ring_radius ({self.draw_ring_radius}) exceeds "
                f"interpolation_ring_radius ({self.interpolation_ring_radius}); "
                "cells beyond the interpolation radius are never aggregated"
            )
        if self.draw_ring_radius == self.confidence_radius:
            raise InterpolationConfigError(
                f"draw_ring_radius and confidence_radius are both {self.draw_ring_radius}; "
                "the confidence curve needs two distinct calibration points"
            )
        if self.confidence_radius > self.draw_ring_radius:
            raise InterpolationConfigError(
                f"confidence_radius ({self.confidence_radius}) exceeds "
                f"draw_ring_radius ({self.draw_ring_radius}); "
                "confidence would never fall to min_confidence at the draw radius"
            )
        if self.confidence_power <= 0:
            raise InterpolationConfigError(
                f"confidence_power must be > 0, got {self.confidence_power}"
            )
        if self.min_confidence < 0:
            raise InterpolationConfigError(
                f"min_confidence must be >= 0, got {self.min_confidence}"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> InterpolationConfig:
        return cls(
            hex_resolution=settings.hex_resolution,
            interpolation_ring_radius=settings.interpolation_ring_radius,
            draw_ring_radius=settings.draw_ring_radius,
            idw_power=settings.idw_power,
            min_confidence=settings.min_confidence,
            confidence_radius=settings.confidence_radius,
            confidence_power=settings.confidence_power,
            saturate_confidence=settings.saturate_confidence,
        )

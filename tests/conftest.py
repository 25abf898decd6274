"""Shared test fixtures for the hex interpolation test suite.

All tests run against the real h3 library; cells are picked around a fixed
origin (lower Manhattan) far from any H3 pentagon, so ring sizes follow the
regular 1, 6, 12, 18, ... pattern.
"""

import h3
import pytest

from hexinterp.interpolator import HexInterpolator
from hexinterp.models.config import InterpolationConfig
from hexinterp.models.sample import Sample

ORIGIN_LAT = 40.7128
ORIGIN_LNG = -74.0060
RESOLUTION = 7


# ── Factory helpers ───────────────────────────────────────────────────────────


def make_sample(
    value: float = 10.0,
    latitude: float = ORIGIN_LAT,
    longitude: float = ORIGIN_LNG,
) -> Sample:
    """Create a Sample for testing."""
    return Sample(longitude=longitude, latitude=latitude, value=value)


def sample_in_cell(cell: str, value: float) -> Sample:
    """Create a Sample located at the centre of an H3 cell."""
    lat, lng = h3.cell_to_latlng(cell)
    return Sample(longitude=lng, latitude=lat, value=value)


def cell_at_distance(origin: str, distance: int) -> str:
    """Pick a deterministic cell exactly ``distance`` rings from ``origin``."""
    return sorted(h3.grid_ring(origin, distance))[0]


def make_config(**overrides) -> InterpolationConfig:
    """Create an InterpolationConfig with the reference constants."""
    params = dict(
        hex_resolution=RESOLUTION,
        interpolation_ring_radius=12,
        draw_ring_radius=6,
        idw_power=3.0,
        min_confidence=0.25,
        confidence_radius=4,
        confidence_power=1.0,
    )
    params.update(overrides)
    return InterpolationConfig(**params)


# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture
def origin_cell() -> str:
    """The resolution-7 H3 cell containing the test origin."""
    return h3.latlng_to_cell(ORIGIN_LAT, ORIGIN_LNG, RESOLUTION)


@pytest.fixture
def config() -> InterpolationConfig:
    """The reference configuration."""
    return make_config()


@pytest.fixture
def interpolator(config: InterpolationConfig) -> HexInterpolator:
    """A HexInterpolator built from the reference configuration."""
    return HexInterpolator(config)

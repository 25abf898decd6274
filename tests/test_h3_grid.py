"""Tests for the h3 grid adapter."""

import h3
import pytest

from hexinterp.pipeline.h3_grid import position_to_cell, rings_by_distance

from tests.conftest import ORIGIN_LAT, ORIGIN_LNG, RESOLUTION


class TestPositionToCell:
    """Test (longitude, latitude) → H3 cell conversion."""

    def test_matches_h3_latlng_order(self):
        """Longitude-first input is swapped into h3's lat/lng order."""
        cell = position_to_cell(ORIGIN_LNG, ORIGIN_LAT, RESOLUTION)
        assert cell == h3.latlng_to_cell(ORIGIN_LAT, ORIGIN_LNG, RESOLUTION)

    def test_resolution_is_respected(self):
        cell = position_to_cell(ORIGIN_LNG, ORIGIN_LAT, 5)
        assert h3.get_resolution(cell) == 5

    def test_nearby_positions_share_a_cell(self):
        a = position_to_cell(ORIGIN_LNG, ORIGIN_LAT, RESOLUTION)
        b = position_to_cell(ORIGIN_LNG + 0.0001, ORIGIN_LAT + 0.0001, RESOLUTION)
        assert a == b


class TestRingsByDistance:
    """Test hollow ring enumeration."""

    def test_distance_zero_is_origin(self, origin_cell):
        assert rings_by_distance(origin_cell, 0) == [(0, {origin_cell})]

    def test_ring_sizes(self, origin_cell):
        """Away from pentagons ring d holds 6·d cells."""
        rings = rings_by_distance(origin_cell, 5)
        assert [d for d, _ in rings] == [0, 1, 2, 3, 4, 5]
        assert [len(ring) for _, ring in rings] == [1, 6, 12, 18, 24, 30]

    def test_rings_are_disjoint(self, origin_cell):
        """Every cell appears at exactly one distance."""
        rings = rings_by_distance(origin_cell, 6)
        all_cells = [cell for _, ring in rings for cell in ring]
        assert len(all_cells) == len(set(all_cells))
        assert set(all_cells) == set(h3.grid_disk(origin_cell, 6))

    def test_each_cell_is_at_its_grid_distance(self, origin_cell):
        for distance, ring in rings_by_distance(origin_cell, 4):
            for cell in ring:
                assert h3.grid_distance(origin_cell, cell) == distance

    def test_negative_distance_rejected(self, origin_cell):
        with pytest.raises(ValueError):
            rings_by_distance(origin_cell, -1)

    def test_pentagon_origin(self):
        """Rings around a pentagon are still complete and disjoint."""
        pentagon = h3.get_pentagons(RESOLUTION)[0]
        rings = rings_by_distance(pentagon, 3)
        all_cells = [cell for _, ring in rings for cell in ring]
        assert len(all_cells) == len(set(all_cells))
        assert set(all_cells) == set(h3.grid_disk(pentagon, 3))
        assert len(rings[1][1]) == 5

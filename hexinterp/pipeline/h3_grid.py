"""Thin adapter over the h3 library for the two grid queries the core needs.

Resolution 7 → average hexagon area ≈ 5.16 km², edge length ≈ 1.22 km.
"""

import h3


def position_to_cell(longitude: float, latitude: float, resolution: int) -> str:
    """Return the H3 cell containing a (longitude, latitude) position."""
    # h3 takes (lat, lng), positions are stored (lng, lat)
    return h3.latlng_to_cell(latitude, longitude, resolution)


def rings_by_distance(origin: str, max_distance: int) -> list[tuple[int, set[str]]]:
    """Enumerate the hollow rings around ``origin`` out to ``max_distance``.

    Args:
        origin: H3 cell at the centre of the expansion.
        max_distance: Largest ring distance (hop count) to return.

    Returns:
        ``[(0, {origin}), (1, ring1), ..., (max_distance, ringN)]``. Each cell
        appears exactly once, at its grid distance from ``origin``.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")

    rings: list[tuple[int, set[str]]] = [(0, {origin})]
    seen = {origin}
    for distance in range(1, max_distance + 1):
        # grid_disk stays correct around pentagons, unlike grid_ring
        disk = set(h3.grid_disk(origin, distance))
        ring = disk - seen
        rings.append((distance, ring))
        seen = disk
    return rings

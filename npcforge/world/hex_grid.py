"""Axial coordinate helpers used by rumor propagation."""

from npcforge.schemas.template import Tile


def axial_distance(a: Tile, b: Tile) -> int:
    """Manhattan distance over axial coordinates: ``|dq| + |dr|``."""
    return abs(a.q - b.q) + abs(a.r - b.r)


def within_range(origin: Tile, tile: Tile, radius: int) -> bool:
    return axial_distance(origin, tile) <= radius

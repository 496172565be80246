"""Tests for axial distance helpers."""

from npcforge.schemas.template import Tile
from npcforge.world.hex_grid import axial_distance, within_range


class TestAxialDistance:
    """Tests for axial_distance and within_range."""

    def test_same_tile(self):
        assert axial_distance(Tile(q=2, r=3), Tile(q=2, r=3)) == 0

    def test_sum_of_deltas(self):
        assert axial_distance(Tile(q=0, r=0), Tile(q=1, r=1)) == 2
        assert axial_distance(Tile(q=-2, r=1), Tile(q=1, r=-1)) == 5

    def test_symmetric(self):
        a, b = Tile(q=4, r=-7), Tile(q=-1, r=2)
        assert axial_distance(a, b) == axial_distance(b, a)

    def test_within_range_inclusive(self):
        origin = Tile()
        assert within_range(origin, Tile(q=2, r=0), 2)
        assert not within_range(origin, Tile(q=2, r=1), 2)

"""Population directory, background spawner and hex helpers."""

from npcforge.world.background_spawner import BackgroundSpawner
from npcforge.world.hex_grid import axial_distance, within_range
from npcforge.world.population import PopulationDirectory

__all__ = ["BackgroundSpawner", "PopulationDirectory", "axial_distance", "within_range"]

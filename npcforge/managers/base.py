"""Base manager class with common patterns."""

import math
from datetime import datetime

from npcforge.clock import Clock, utc_now
from npcforge.schemas.character import CharacterRecord
from npcforge.world.population import PopulationDirectory


class BaseManager:
    """Base class for the interaction managers.

    Provides common patterns:
    - Population directory access (records are looked up by id)
    - An injectable clock for timestamps
    - Scalar clamping
    """

    def __init__(self, directory: PopulationDirectory, clock: Clock | None = None) -> None:
        """Initialize manager with the population directory.

        Args:
            directory: Directory that owns every character record.
            clock: Time source; defaults to UTC wall-clock time.
        """
        self.directory = directory
        self.clock = clock or utc_now

    def now(self) -> datetime:
        return self.clock()

    def _get(self, npc_id: str) -> CharacterRecord | None:
        return self.directory.get(npc_id)

    def _clamp(self, value: int | float, min_val: int = 0, max_val: int = 100) -> int:
        """Clamp a value between min and max bounds, rounding halves up."""
        return math.floor(max(min_val, min(max_val, value)) + 0.5)

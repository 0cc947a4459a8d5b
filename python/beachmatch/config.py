"""Engine tuning knobs.

The engine never reads level data or globals; callers construct an
``EngineConfig`` (or use ``DEFAULT_CONFIG``) and pass it down.
"""

from __future__ import annotations

from dataclasses import dataclass

from beachmatch.models.tile import TileType


@dataclass(frozen=True)
class EngineConfig:
    max_cascade_rounds: int = 50
    max_reshuffle_attempts: int = 50
    max_generation_attempts: int = 100
    collectible_type: TileType = TileType.SHELL
    base_points: int = 10
    length_bonus: int = 5
    bomb_radius: int = 2
    rocket_length: int = 4

    def match_score(self, length: int) -> int:
        """Points for a single match of *length* cells.

        A bomb or rocket area is scored as one match of its full size, empty
        blocker cells and exiting tiles included.
        """
        return length * self.base_points + max(0, length - 3) * self.length_bonus


DEFAULT_CONFIG = EngineConfig()

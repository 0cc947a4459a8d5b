"""Sand blocker overlay."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from beachmatch.models.grid import Coord
from beachmatch.models.tile import TileType


@dataclass(frozen=True)
class Blocker:
    """A sand pile occupying one cell.

    ``hits`` counts charges absorbed after the umbrella is gone; the pile
    clears once ``hits`` reaches ``sand_level``.
    """

    row: int
    col: int
    sand_level: int = 1
    has_umbrella: bool = False
    has_treasure: bool = False
    hits: int = 0

    def __post_init__(self) -> None:
        if self.sand_level < 1:
            raise ValueError(f"sand_level must be positive, got {self.sand_level}.")

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def remaining(self) -> int:
        """Charges still needed, counting the umbrella as one."""
        return self.sand_level - self.hits + (1 if self.has_umbrella else 0)


class BlockerChange(StrEnum):
    UMBRELLA_REMOVED = "umbrella_removed"
    DAMAGED = "damaged"
    CLEARED = "cleared"


@dataclass(frozen=True)
class BlockerDelta:
    row: int
    col: int
    kind: BlockerChange
    treasure: TileType | None = None

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


def blocker_cells(blockers: Iterable[Blocker]) -> set[Coord]:
    return {b.coord for b in blockers}

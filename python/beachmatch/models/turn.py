"""Records produced by a resolved turn."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from beachmatch.models.blocker import Blocker, BlockerDelta
from beachmatch.models.grid import Coord, Grid, Match


class TriggerKind(StrEnum):
    BOMB = "bomb"
    ROCKET = "rocket"


@dataclass(frozen=True)
class SpecialTrigger:
    """A bomb or rocket fired by the user's swap, centred on the destination."""

    kind: TriggerKind
    center: Coord
    area: Match
    is_horizontal: bool = False


@dataclass(frozen=True)
class ExitEvent:
    """An exiting tile that left the board through the bottom row."""

    tile_id: str
    col: int
    round: int


@dataclass
class TurnResult:
    grid: Grid
    blockers: tuple[Blocker, ...]
    matches: list[Match] = field(default_factory=list)
    total_matches: int = 0
    score: int = 0
    collected_tiles: int = 0
    treasure_collected: int = 0
    blocker_deltas: list[BlockerDelta] = field(default_factory=list)
    exits: list[ExitEvent] = field(default_factory=list)
    trigger: SpecialTrigger | None = None
    swap_reverted: bool = False
    rounds: int = 0
    truncated: bool = False
    reshuffled: bool = False
    first_round_matches: int = 0

    # -- queries --------------------------------------------------------------

    @property
    def was_bomb_triggered(self) -> bool:
        return self.trigger is not None and self.trigger.kind is TriggerKind.BOMB

    @property
    def was_rocket_triggered(self) -> bool:
        return self.trigger is not None and self.trigger.kind is TriggerKind.ROCKET

    @property
    def cascade_matches(self) -> list[Match]:
        """Matches after the first resolution step."""
        return self.matches[self.first_round_matches:]

    @property
    def exited_count(self) -> int:
        return len(self.exits)

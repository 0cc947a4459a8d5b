"""Tracks the mutable state of a level in progress."""

from __future__ import annotations

from beachmatch.models.blocker import Blocker
from beachmatch.models.grid import Grid
from beachmatch.models.turn import TurnResult


class GameState:
    """Holds the current board, blocker overlay and running totals."""

    def __init__(self, grid: Grid, blockers: tuple[Blocker, ...] = ()) -> None:
        self.grid = grid
        self.blockers = blockers
        self.moves: int = 0
        self.score: int = 0
        self.combos: int = 0
        self.collected_tiles: int = 0
        self.treasure_collected: int = 0
        self.exited: int = 0
        self.reshuffles: int = 0
        self.last_result: TurnResult | None = None

    # -- turns ----------------------------------------------------------------

    def apply(self, result: TurnResult) -> None:
        """Fold a resolved turn into the running totals.

        Reverted swaps replace nothing and don't count as a move.
        """
        self.last_result = result
        if result.swap_reverted:
            return
        self.grid = result.grid
        self.blockers = result.blockers
        self.moves += 1
        self.score += result.score
        self.combos += max(0, result.rounds - 1)
        self.collected_tiles += result.collected_tiles
        self.treasure_collected += result.treasure_collected
        self.exited += result.exited_count
        self.reshuffles += int(result.reshuffled)

    # -- queries --------------------------------------------------------------

    @property
    def blockers_left(self) -> int:
        return len(self.blockers)

    @property
    def is_clear(self) -> bool:
        """True once every sand pile on the board is gone."""
        return not self.blockers

"""Core gameplay logic: validates swaps and feeds them to the cascade."""

from __future__ import annotations

from collections.abc import Iterable

from beachmatch.config import DEFAULT_CONFIG, EngineConfig
from beachmatch.engine.cascade import process_turn
from beachmatch.engine.gamegenerator import TileSource, create_valid_board
from beachmatch.engine.gamestate import GameState
from beachmatch.engine.matching import is_valid_move
from beachmatch.models.blocker import Blocker
from beachmatch.models.grid import Coord, Grid, Move
from beachmatch.models.tile import Variant
from beachmatch.models.turn import TurnResult


class GamePlay:
    """Orchestrates a single level session."""

    def __init__(
        self,
        variant: Variant | str = Variant.SAND,
        blockers: Iterable[Blocker] = (),
        seed: int | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> None:
        self.variant = Variant(variant)
        self.config = config
        self.source = TileSource.seeded(seed)
        blockers = tuple(blockers)
        grid = create_valid_board(self.variant, blockers, self.source, config)
        self.state = GameState(grid, blockers)

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        variant: Variant | str = Variant.SAND,
        blockers: Iterable[Blocker] = (),
        source: TileSource | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> GamePlay:
        """Create a session from an existing board (e.g. a hand-built level)."""
        obj = object.__new__(cls)
        obj.variant = Variant(variant)
        obj.config = config
        obj.source = source or TileSource()
        obj.state = GameState(grid, tuple(blockers))
        return obj

    # -- movement -------------------------------------------------------------

    def swap(self, origin: Coord, dest: Coord) -> TurnResult | None:
        """Swap the tile at *origin* into *dest* and resolve the turn.

        Returns ``None`` without touching the board if the swap would not
        make a match.
        """
        if not is_valid_move(self.state.grid, origin, dest):
            return None
        result = process_turn(
            self.state.grid,
            self.variant,
            self.state.blockers,
            Move(origin, dest),
            source=self.source,
            config=self.config,
        )
        self.state.apply(result)
        return result

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def blockers(self) -> tuple[Blocker, ...]:
        return self.state.blockers

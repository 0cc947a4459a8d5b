"""Generates starting boards that are at rest (no pre-existing matches)."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from beachmatch.config import DEFAULT_CONFIG, EngineConfig
from beachmatch.engine.gamegenerator.source import TileSource
from beachmatch.engine.matching.detector import find_matches
from beachmatch.engine.matching.validator import get_valid_moves
from beachmatch.errors import BoardGenerationError
from beachmatch.models.blocker import Blocker, blocker_cells
from beachmatch.models.grid import Coord, Grid
from beachmatch.models.tile import Tile, TileType, Variant, palette_for

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Creates boards cell by cell, re-rolling any type that would complete a run."""

    @staticmethod
    def generate(
        variant: Variant | str = Variant.SAND,
        blockers: Iterable[Blocker] = (),
        source: TileSource | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
        require_move: bool = True,
    ) -> Grid:
        """Return a fresh match-free board; blocker cells stay empty.

        With *require_move* the board also has at least one legal swap.
        """
        source = source or TileSource()
        palette = palette_for(variant)
        fixed: dict[Coord, Tile | None] = {coord: None for coord in blocker_cells(blockers)}

        for attempt in range(1, config.max_generation_attempts + 1):
            grid = BoardGenerator._deal(palette, fixed, source)
            if find_matches(grid):
                logger.warning("Generated board has matches, regenerating (attempt %d)", attempt)
                continue
            if require_move and not get_valid_moves(grid):
                logger.debug("Generated board has no legal move, regenerating (attempt %d)", attempt)
                continue
            return grid

        raise BoardGenerationError(
            f"No usable board after {config.max_generation_attempts} attempts."
        )

    @staticmethod
    def from_layout(
        rows: Sequence[Sequence[TileType | None]],
        variant: Variant | str = Variant.SAND,
        blockers: Iterable[Blocker] = (),
        source: TileSource | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> Grid:
        """Build a board from a level layout and re-roll tiles until it is at rest.

        Exiting tiles in the layout are kept as they are.
        """
        source = source or TileSource()
        palette = palette_for(variant)
        grid = Grid.from_rows(rows)
        for coord in blocker_cells(blockers):
            grid.remove(coord)

        matches = find_matches(grid)
        for _ in range(config.max_generation_attempts):
            if not matches:
                return grid
            for match in matches:
                for coord in match:
                    tile = grid.at(coord)
                    if tile is not None and not tile.is_exiting:
                        grid.place(coord, source.random_tile(*coord, palette))
            matches = find_matches(grid)

        if not matches:
            return grid
        raise BoardGenerationError(
            f"Layout still has matches after {config.max_generation_attempts} re-rolls."
        )

    @staticmethod
    def redeal(
        grid: Grid,
        blockers: Iterable[Blocker] = (),
        variant: Variant | str = Variant.SAND,
        source: TileSource | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> Grid:
        """Replace every regular tile with fresh ones, keeping exiting tiles in place.

        Prefers a deal with a legal move; falls back to the first match-free
        deal if none turns up within the attempt budget.
        """
        source = source or TileSource()
        palette = palette_for(variant)
        fixed: dict[Coord, Tile | None] = {coord: None for coord in blocker_cells(blockers)}
        for tile in grid.tiles():
            if tile.is_exiting:
                fixed[(tile.row, tile.col)] = tile

        fallback: Grid | None = None
        for _ in range(config.max_generation_attempts):
            dealt = BoardGenerator._deal(palette, fixed, source)
            if find_matches(dealt):
                continue
            if get_valid_moves(dealt):
                return dealt
            fallback = fallback or dealt

        if fallback is None:
            raise BoardGenerationError("Redeal could not produce a match-free board.")
        logger.warning("Redeal found no board with a legal move; using a match-free deal")
        return fallback

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _deal(
        palette: Sequence[TileType],
        fixed: Mapping[Coord, Tile | None],
        source: TileSource,
    ) -> Grid:
        grid = Grid.empty()
        for coord in grid.coords():
            if coord in fixed:
                grid.place(coord, fixed[coord])
                continue
            avoid = BoardGenerator._completing_types(grid, coord)
            choices = [t for t in palette if t not in avoid] or list(palette)
            grid.place(coord, source.new_tile(*coord, source.choice(choices)))
        return grid

    @staticmethod
    def _completing_types(grid: Grid, coord: Coord) -> set[TileType]:
        """Types that would finish a run with the two cells left of or above *coord*."""
        r, c = coord
        avoid: set[TileType] = set()
        for pair in (((r, c - 1), (r, c - 2)), ((r - 1, c), (r - 2, c))):
            if min(pair[1]) < 0:
                continue
            first, second = grid.at(pair[0]), grid.at(pair[1])
            if (
                first is not None
                and second is not None
                and not first.is_exiting
                and first.type == second.type
            ):
                avoid.add(first.type)
        return avoid


def create_valid_board(
    variant: Variant | str = Variant.SAND,
    blockers: Iterable[Blocker] = (),
    source: TileSource | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
    require_move: bool = True,
) -> Grid:
    """Fresh starting board with no matches (and, by default, a legal swap)."""
    return BoardGenerator.generate(variant, blockers, source, config, require_move)


def create_board_from_layout(
    rows: Sequence[Sequence[TileType | None]],
    variant: Variant | str = Variant.SAND,
    blockers: Iterable[Blocker] = (),
    source: TileSource | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Grid:
    return BoardGenerator.from_layout(rows, variant, blockers, source, config)


def redeal_board(
    grid: Grid,
    blockers: Iterable[Blocker] = (),
    variant: Variant | str = Variant.SAND,
    source: TileSource | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Grid:
    return BoardGenerator.redeal(grid, blockers, variant, source, config)

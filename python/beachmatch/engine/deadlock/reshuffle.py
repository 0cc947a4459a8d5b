"""Deadlock detection and in-place reshuffling of the tiles already on the board."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from beachmatch.config import DEFAULT_CONFIG
from beachmatch.engine.gamegenerator.source import TileSource
from beachmatch.engine.matching.detector import find_matches
from beachmatch.engine.matching.validator import get_valid_moves
from beachmatch.models.blocker import Blocker, blocker_cells
from beachmatch.models.grid import Grid
from beachmatch.models.tile import Tile

logger = logging.getLogger(__name__)


def check_if_game_impossible(grid: Grid) -> bool:
    """True when no swap on *grid* would produce a match."""
    return not get_valid_moves(grid)


def is_playable(grid: Grid) -> bool:
    """At rest and with at least one legal swap."""
    return not find_matches(grid) and bool(get_valid_moves(grid))


def _deal(grid: Grid, blockers: Iterable[Blocker], source: TileSource) -> Grid:
    blocked = blocker_cells(blockers)
    slots = [
        coord
        for coord in grid.coords()
        if coord not in blocked
        and not ((tile := grid.at(coord)) is not None and tile.is_exiting)
    ]
    pool: list[Tile] = [tile for coord in slots if (tile := grid.at(coord)) is not None]
    source.shuffle(pool)

    out = grid.copy()
    for coord in blocked:
        out.place(coord, None)
    for coord in slots:
        out.place(coord, pool.pop() if pool else None)
    return out


def rearrange_board(
    grid: Grid,
    blockers: Iterable[Blocker] = (),
    source: TileSource | None = None,
    max_attempts: int = DEFAULT_CONFIG.max_reshuffle_attempts,
) -> Grid:
    """Shuffle the regular tiles over the non-blocker cells.

    Tiles are re-dealt in row-major order after a Fisher–Yates shuffle, so the
    multiset of tile types never changes. Blocker cells stay empty and
    exiting tiles stay where they are. The shuffle is retried until the
    result is at rest with a legal swap; after *max_attempts* the last
    shuffle is returned as is. *grid* is not modified.
    """
    source = source or TileSource()
    blockers = tuple(blockers)
    shuffled = grid
    for attempt in range(1, max(1, max_attempts) + 1):
        shuffled = _deal(grid, blockers, source)
        if is_playable(shuffled):
            logger.debug("Reshuffle succeeded on attempt %d", attempt)
            return shuffled
    logger.warning("Reshuffle found no playable board in %d attempts", max_attempts)
    return shuffled

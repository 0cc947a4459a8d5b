"""Column compaction and refill through blocker-split sections."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from beachmatch.engine.gamegenerator.source import TileSource
from beachmatch.models.blocker import Blocker, blocker_cells
from beachmatch.models.grid import BOARD_SIZE, Grid
from beachmatch.models.tile import TileType


def column_sections(blocker_rows: Iterable[int]) -> list[tuple[int, int]]:
    """Split a column into inclusive ``(start, end)`` row ranges between blockers."""
    sections: list[tuple[int, int]] = []
    start = 0
    for row in sorted(set(blocker_rows)):
        if row > start:
            sections.append((start, row - 1))
        start = row + 1
    if start < BOARD_SIZE:
        sections.append((start, BOARD_SIZE - 1))
    return sections


def drop_tiles(
    grid: Grid,
    palette: Sequence[TileType],
    blockers: Iterable[Blocker] = (),
    source: TileSource | None = None,
) -> Grid:
    """Return a new grid with every section compacted downward and refilled.

    Tiles keep their relative order and ids; vacated cells at the top of a
    section get fresh tiles drawn uniformly from *palette*. Blocker cells are
    left empty and nothing falls past them.
    """
    source = source or TileSource()
    blocked = blocker_cells(blockers)
    out = grid.copy()

    for col in range(BOARD_SIZE):
        blocker_rows = [r for r, c in blocked if c == col]
        for start, end in column_sections(blocker_rows):
            survivors = [
                tile
                for row in range(start, end + 1)
                if (tile := out.at((row, col))) is not None
            ]
            write = end
            for tile in reversed(survivors):
                out.place((write, col), tile)
                write -= 1
            for row in range(write, start - 1, -1):
                out.place((row, col), source.random_tile(row, col, palette))
        for row in blocker_rows:
            out.place((row, col), None)

    return out

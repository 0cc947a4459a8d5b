"""Row and column scanning for runs of three or more."""

from __future__ import annotations

from beachmatch.models.grid import BOARD_SIZE, Coord, Grid, Match
from beachmatch.models.tile import TileType


def _matchable(grid: Grid, coord: Coord) -> TileType | None:
    """Type of the tile at *coord*, or ``None`` if it can't take part in a match."""
    tile = grid.at(coord)
    if tile is None or tile.is_exiting:
        return None
    return tile.type


def _scan_line(grid: Grid, line: list[Coord]) -> list[Match]:
    matches: list[Match] = []
    i = 0
    while i < len(line) - 2:
        first = _matchable(grid, line[i])
        if (
            first is not None
            and _matchable(grid, line[i + 1]) == first
            and _matchable(grid, line[i + 2]) == first
        ):
            end = i + 3
            while end < len(line) and _matchable(grid, line[end]) == first:
                end += 1
            matches.append(tuple(line[i:end]))
            i = end
        else:
            i += 1
    return matches


def find_matches(grid: Grid) -> list[Match]:
    """Return every horizontal then every vertical run of ≥3 same-type tiles.

    Runs are reported per axis; a cell in both a horizontal and a vertical
    run appears in both entries. Empty cells and exiting tiles never match.
    """
    matches: list[Match] = []
    for r in range(BOARD_SIZE):
        matches.extend(_scan_line(grid, [(r, c) for c in range(BOARD_SIZE)]))
    for c in range(BOARD_SIZE):
        matches.extend(_scan_line(grid, [(r, c) for r in range(BOARD_SIZE)]))
    return matches


def is_horizontal(match: Match) -> bool:
    return len({r for r, _ in match}) == 1


def is_vertical(match: Match) -> bool:
    return len({c for _, c in match}) == 1


def run_length(grid: Grid, coord: Coord, dr: int, dc: int) -> int:
    """Length of the same-type run through *coord* along ``(dr, dc)``."""
    tile_type = _matchable(grid, coord)
    if tile_type is None:
        return 0
    length = 1
    for sign in (1, -1):
        r, c = coord[0] + sign * dr, coord[1] + sign * dc
        while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and _matchable(grid, (r, c)) == tile_type:
            length += 1
            r, c = r + sign * dr, c + sign * dc
    return length

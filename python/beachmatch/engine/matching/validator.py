"""Swap legality checks used by the input layer and the deadlock detector."""

from __future__ import annotations

from beachmatch.engine.matching.detector import find_matches
from beachmatch.models.grid import BOARD_SIZE, Coord, Grid, Move, are_adjacent, in_bounds


def is_valid_move(grid: Grid, a: Coord, b: Coord) -> bool:
    """True if swapping *a* and *b* leaves at least one match on the board.

    Non-adjacent, out-of-bounds or empty (blocker) cells are simply invalid;
    nothing is raised and *grid* is never touched.
    """
    if not (in_bounds(a) and in_bounds(b)) or not are_adjacent(a, b):
        return False
    if grid.at(a) is None or grid.at(b) is None:
        return False
    trial = grid.copy()
    trial.swap(a, b)
    return bool(find_matches(trial))


def get_valid_moves(grid: Grid) -> list[Move]:
    """Every legal swap, each unordered adjacent pair checked exactly once.

    Pairs are enumerated as (cell, right neighbour) and (cell, lower
    neighbour) in row-major order.
    """
    moves: list[Move] = []
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if c < BOARD_SIZE - 1 and is_valid_move(grid, (r, c), (r, c + 1)):
                moves.append(Move((r, c), (r, c + 1)))
            if r < BOARD_SIZE - 1 and is_valid_move(grid, (r, c), (r + 1, c)):
                moves.append(Move((r, c), (r + 1, c)))
    return moves

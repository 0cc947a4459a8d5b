"""Bomb and rocket detection for the user's swap.

Only the swap itself can fire a special: the destination cell is the
anchor, so matches produced later by falling tiles never qualify.
"""

from __future__ import annotations

from beachmatch.config import DEFAULT_CONFIG, EngineConfig
from beachmatch.engine.matching.detector import find_matches, is_horizontal, is_vertical, run_length
from beachmatch.models.grid import BOARD_SIZE, Coord, Grid, Match, Move, in_bounds
from beachmatch.models.turn import SpecialTrigger, TriggerKind


def _swapped(grid: Grid, move: Move) -> Grid | None:
    """Copy of *grid* with *move* applied, or ``None`` if the move can't anchor a trigger."""
    if not move.in_bounds or not move.is_adjacent:
        return None
    if grid.at(move.origin) is None or grid.at(move.dest) is None:
        return None
    trial = grid.copy()
    trial.swap(move.origin, move.dest)
    anchor = trial.at(move.dest)
    if anchor is None or anchor.is_exiting:
        return None
    return trial


def _bomb_on(trial: Grid, center: Coord) -> bool:
    through = [m for m in find_matches(trial) if center in m]
    return any(is_horizontal(m) for m in through) and any(is_vertical(m) for m in through)


def detect_bomb_trigger(grid: Grid, move: Move) -> bool:
    """True if the swap makes a horizontal and a vertical run crossing at ``move.dest``."""
    trial = _swapped(grid, move)
    return trial is not None and _bomb_on(trial, move.dest)


def detect_rocket_trigger(
    grid: Grid, move: Move, min_length: int = DEFAULT_CONFIG.rocket_length
) -> tuple[bool, bool]:
    """Return ``(triggered, is_horizontal)`` for a straight run of *min_length* through ``move.dest``.

    The horizontal axis is checked first.
    """
    trial = _swapped(grid, move)
    if trial is None:
        return False, False
    if run_length(trial, move.dest, 0, 1) >= min_length:
        return True, True
    if run_length(trial, move.dest, 1, 0) >= min_length:
        return True, False
    return False, False


def get_bomb_explosion_tiles(center: Coord, radius: int = DEFAULT_CONFIG.bomb_radius) -> Match:
    """Square of side ``2 * radius + 1`` around *center*, clipped to the board."""
    cr, cc = center
    return tuple(
        (r, c)
        for r in range(cr - radius, cr + radius + 1)
        for c in range(cc - radius, cc + radius + 1)
        if in_bounds((r, c))
    )


def get_rocket_explosion_tiles(center: Coord, is_horizontal: bool) -> Match:
    """The line through *center* perpendicular to the run.

    A horizontal run clears the whole column, a vertical run the whole row.
    """
    r, c = center
    if is_horizontal:
        return tuple((row, c) for row in range(BOARD_SIZE))
    return tuple((r, col) for col in range(BOARD_SIZE))


def detect_special_trigger(
    grid: Grid, move: Move, config: EngineConfig = DEFAULT_CONFIG
) -> SpecialTrigger | None:
    """Classify a swap as bomb, rocket or neither (bomb wins over rocket).

    *grid* is the board before the swap; it is not modified.
    """
    trial = _swapped(grid, move)
    if trial is None:
        return None
    center = move.dest
    if _bomb_on(trial, center):
        return SpecialTrigger(
            kind=TriggerKind.BOMB,
            center=center,
            area=get_bomb_explosion_tiles(center, config.bomb_radius),
        )
    triggered, horizontal = detect_rocket_trigger(grid, move, config.rocket_length)
    if triggered:
        return SpecialTrigger(
            kind=TriggerKind.ROCKET,
            center=center,
            area=get_rocket_explosion_tiles(center, horizontal),
            is_horizontal=horizontal,
        )
    return None

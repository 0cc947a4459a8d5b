"""Turn resolution: trigger or match, clear, fall, exit, repeat until at rest.

A turn is fully synchronous. The caller's grid and blocker overlay are never
modified; the resolved board and overlay come back in the ``TurnResult``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from beachmatch.config import DEFAULT_CONFIG, EngineConfig
from beachmatch.engine.blockers.sand import update_blockers
from beachmatch.engine.deadlock.reshuffle import check_if_game_impossible, is_playable, rearrange_board
from beachmatch.engine.gamegenerator.generator import redeal_board
from beachmatch.engine.gamegenerator.source import TileSource
from beachmatch.engine.gravity.gravity import drop_tiles
from beachmatch.engine.matching.detector import find_matches
from beachmatch.engine.specials.triggers import detect_special_trigger
from beachmatch.models.blocker import Blocker
from beachmatch.models.grid import BOARD_SIZE, Coord, Grid, Match, Move
from beachmatch.models.tile import Tile, TileType, Variant, palette_for
from beachmatch.models.turn import ExitEvent, TurnResult

logger = logging.getLogger(__name__)

BOTTOM_ROW = BOARD_SIZE - 1


def _can_swap(grid: Grid, move: Move) -> bool:
    return (
        move.in_bounds
        and move.is_adjacent
        and grid.at(move.origin) is not None
        and grid.at(move.dest) is not None
    )


def _remove_matched(grid: Grid, matches: Iterable[Match]) -> list[Tile]:
    """Empty every matched cell; each tile is returned once even if two runs share it."""
    removed: dict[Coord, Tile] = {}
    for match in matches:
        for coord in match:
            tile = grid.at(coord)
            if tile is not None and not tile.is_exiting:
                removed[coord] = tile
    for coord in removed:
        grid.remove(coord)
    return list(removed.values())


def drain_exits(
    grid: Grid,
    palette: Sequence[TileType],
    blockers: Sequence[Blocker],
    source: TileSource,
    round_no: int,
) -> tuple[Grid, list[ExitEvent]]:
    """Let exiting tiles on the bottom row leave, refilling after each wave.

    Repeats while gravity keeps bringing exiting tiles down to the bottom row.
    """
    events: list[ExitEvent] = []
    while True:
        leaving = [
            tile
            for col in range(BOARD_SIZE)
            if (tile := grid.at((BOTTOM_ROW, col))) is not None and tile.is_exiting
        ]
        if not leaving:
            return grid, events
        for tile in leaving:
            grid.remove((BOTTOM_ROW, tile.col))
            events.append(ExitEvent(tile.id, tile.col, round_no))
        grid = drop_tiles(grid, palette, blockers, source)


def process_turn(
    grid: Grid,
    variant: Variant | str,
    blockers: Iterable[Blocker] = (),
    move: Move | None = None,
    *,
    source: TileSource | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> TurnResult:
    """Resolve one user turn (or, without *move*, settle an existing board).

    The first step uses the special trigger of the swap when it fires; every
    later round uses ordinary match detection. A swap that produces nothing is
    reverted and the untouched board is returned with ``swap_reverted`` set.
    """
    source = source or TileSource()
    palette = palette_for(variant)
    overlay = tuple(blockers)
    work = grid.copy()
    result = TurnResult(grid=work, blockers=overlay)

    if move is not None:
        if not _can_swap(work, move):
            result.swap_reverted = True
            return result
        result.trigger = detect_special_trigger(work, move, config)
        work.swap(move.origin, move.dest)
        matches = [result.trigger.area] if result.trigger else find_matches(work)
        if not matches:
            logger.debug("Swap %s produced no match, reverting", move)
            result.grid = grid.copy()
            result.swap_reverted = True
            return result
        result.first_round_matches = len(matches)
    else:
        matches = find_matches(work)
        result.first_round_matches = len(matches)

    while True:
        if not matches:
            # Exiting tiles may already sit on the bottom row with nothing matched.
            work, swept = drain_exits(work, palette, overlay, source, result.rounds)
            if not swept:
                break
            result.exits.extend(swept)
            matches = find_matches(work)
            continue

        if result.rounds >= config.max_cascade_rounds:
            logger.warning(
                "Cascade stopped after %d rounds with %d matches pending",
                result.rounds,
                len(matches),
            )
            result.truncated = True
            break

        result.matches.extend(matches)
        result.score += sum(config.match_score(len(m)) for m in matches)

        removed = _remove_matched(work, matches)
        result.collected_tiles += sum(t.type is config.collectible_type for t in removed)
        result.treasure_collected += sum(t.is_treasure for t in removed)

        update = update_blockers(matches, overlay, source)
        overlay = update.blockers
        result.blocker_deltas.extend(update.deltas)
        for treasure in update.revealed:
            work.place((treasure.row, treasure.col), treasure)

        work = drop_tiles(work, palette, overlay, source)
        work, exits = drain_exits(work, palette, overlay, source, result.rounds)
        result.exits.extend(exits)

        logger.debug(
            "round %d: %d matches, %d removed, %d exits",
            result.rounds,
            len(matches),
            len(removed),
            len(exits),
        )
        result.rounds += 1
        matches = find_matches(work)

    if check_if_game_impossible(work):
        logger.info("No legal move left, reshuffling")
        work = rearrange_board(work, overlay, source, config.max_reshuffle_attempts)
        if not is_playable(work):
            logger.warning("Reshuffle exhausted, redealing the board")
            work = redeal_board(work, overlay, variant, source, config)
        result.reshuffled = True

    result.grid = work
    result.blockers = overlay
    result.total_matches = len(result.matches)
    return result

"""Move ranking for hints and autoplay."""

from __future__ import annotations

from beachmatch.engine.matching import find_matches, get_valid_moves
from beachmatch.engine.specials import detect_special_trigger
from beachmatch.models.grid import Grid, Move
from beachmatch.models.turn import TriggerKind

_TRIGGER_RANK = {TriggerKind.BOMB: 2, TriggerKind.ROCKET: 1}


class Solver:
    """Stateless move ranker; all methods are static."""

    @staticmethod
    def score_move(grid: Grid, move: Move) -> tuple[int, int]:
        """Sort key for *move*: trigger rank first, then longest run it makes."""
        trigger = detect_special_trigger(grid, move)
        if trigger is not None:
            return _TRIGGER_RANK[trigger.kind], len(trigger.area)
        trial = grid.copy()
        trial.swap(move.origin, move.dest)
        return 0, max((len(m) for m in find_matches(trial)), default=0)

    @staticmethod
    def rank_moves(grid: Grid) -> list[Move]:
        """Every valid swap in both directions, best first.

        Specials anchor on the destination, so ``a -> b`` and ``b -> a`` can
        rank differently. Ties keep row-major order.
        """
        moves = [m for pair in get_valid_moves(grid) for m in (pair, pair.reversed())]
        return sorted(moves, key=lambda m: Solver.score_move(grid, m), reverse=True)

    @staticmethod
    def hint(grid: Grid) -> Move | None:
        """Return the single best swap, or ``None`` if the board is deadlocked."""
        ranked = Solver.rank_moves(grid)
        return ranked[0] if ranked else None

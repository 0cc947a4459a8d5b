"""Sand blocker clearing.

Each round, every matched cell pokes its four neighbours; a blocker poked
``n`` times absorbs ``n`` charges:

* an umbrella poked exactly once is stripped and nothing else happens;
* otherwise the umbrella (if any) eats one charge and the rest accumulate in
  ``hits``, which persist across turns; the pile clears once ``hits``
  reaches ``sand_level``, however the charges were spread over rounds.

Cleared piles that hid treasure leave a treasure tile in their cell.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

from beachmatch.engine.gamegenerator.source import TileSource
from beachmatch.models.blocker import Blocker, BlockerChange, BlockerDelta
from beachmatch.models.grid import Coord, Match, orthogonal_neighbors
from beachmatch.models.tile import TREASURE_TYPES, Tile

logger = logging.getLogger(__name__)


@dataclass
class BlockerUpdate:
    blockers: tuple[Blocker, ...]
    deltas: list[BlockerDelta] = field(default_factory=list)
    revealed: list[Tile] = field(default_factory=list)

    @property
    def cleared(self) -> list[Coord]:
        return [d.coord for d in self.deltas if d.kind is BlockerChange.CLEARED]


def count_adjacent_hits(matches: Iterable[Match], blockers: Iterable[Blocker]) -> Counter[Coord]:
    """Per-blocker count of matched cells touching it this round."""
    positions = {b.coord for b in blockers}
    hits: Counter[Coord] = Counter()
    for match in matches:
        for coord in match:
            for neighbor in orthogonal_neighbors(coord):
                if neighbor in positions:
                    hits[neighbor] += 1
    return hits


def apply_hits(blocker: Blocker, count: int) -> tuple[Blocker | None, BlockerChange]:
    """Apply one round's *count* to *blocker*; ``None`` means it cleared."""
    if blocker.has_umbrella:
        if count == 1:
            return replace(blocker, has_umbrella=False), BlockerChange.UMBRELLA_REMOVED
        hits = blocker.hits + count - 1
        blocker = replace(blocker, has_umbrella=False)
    else:
        hits = blocker.hits + count
    if hits >= blocker.sand_level:
        return None, BlockerChange.CLEARED
    return replace(blocker, hits=hits), BlockerChange.DAMAGED


def update_blockers(
    matches: Sequence[Match],
    blockers: Sequence[Blocker],
    source: TileSource | None = None,
) -> BlockerUpdate:
    """Run one round of the blocker state machine.

    *blockers* is not modified; the surviving overlay comes back in the
    result, in the original order.
    """
    hits = count_adjacent_hits(matches, blockers)
    if not hits:
        return BlockerUpdate(blockers=tuple(blockers))

    source = source or TileSource()
    survivors: list[Blocker] = []
    update = BlockerUpdate(blockers=())
    for blocker in blockers:
        count = hits.get(blocker.coord, 0)
        if count == 0:
            survivors.append(blocker)
            continue
        after, change = apply_hits(blocker, count)
        treasure = None
        if after is None:
            if blocker.has_treasure:
                treasure = source.choice(TREASURE_TYPES)
                update.revealed.append(source.new_tile(blocker.row, blocker.col, treasure))
        else:
            survivors.append(after)
        update.deltas.append(BlockerDelta(blocker.row, blocker.col, change, treasure))

    update.blockers = tuple(survivors)
    logger.debug(
        "blockers: %d touched, %d cleared, %d treasure revealed",
        len(update.deltas),
        len(update.cleared),
        len(update.revealed),
    )
    return update

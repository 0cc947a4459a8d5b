"""Sand blocker state machine."""

from __future__ import annotations

import pytest

from beachmatch.engine.blockers import apply_hits, count_adjacent_hits, update_blockers
from beachmatch.engine.gamegenerator import TileSource
from beachmatch.models.blocker import Blocker, BlockerChange
from beachmatch.models.tile import TREASURE_TYPES

ROW0 = ((0, 0), (0, 1), (0, 2))
COL2 = ((0, 2), (1, 2), (2, 2))


def test_matches_touching_twice_count_twice() -> None:
    hits = count_adjacent_hits([ROW0, COL2], [Blocker(1, 1), Blocker(5, 5)])
    assert hits[(1, 1)] == 2
    assert (5, 5) not in hits


def test_single_match_touches_once_per_cell() -> None:
    hits = count_adjacent_hits([((1, 0), (1, 1), (1, 2))], [Blocker(0, 1), Blocker(2, 3)])
    assert hits == {(0, 1): 1}


@pytest.mark.parametrize(
    "blocker, count, change, after",
    [
        (Blocker(0, 0, has_umbrella=True), 1, BlockerChange.UMBRELLA_REMOVED, Blocker(0, 0)),
        (Blocker(0, 0, sand_level=3, has_umbrella=True), 1, BlockerChange.UMBRELLA_REMOVED,
         Blocker(0, 0, sand_level=3)),
        (Blocker(0, 0, has_umbrella=True), 2, BlockerChange.CLEARED, None),
        (Blocker(0, 0, sand_level=3, has_umbrella=True), 2, BlockerChange.DAMAGED,
         Blocker(0, 0, sand_level=3, hits=1)),
        (Blocker(0, 0, sand_level=2, has_umbrella=True), 2, BlockerChange.DAMAGED,
         Blocker(0, 0, sand_level=2, hits=1)),
        (Blocker(0, 0, sand_level=2, has_umbrella=True), 3, BlockerChange.CLEARED, None),
        (Blocker(0, 0), 1, BlockerChange.CLEARED, None),
        (Blocker(0, 0, sand_level=2), 1, BlockerChange.DAMAGED, Blocker(0, 0, sand_level=2, hits=1)),
        (Blocker(0, 0, sand_level=2, hits=1), 1, BlockerChange.CLEARED, None),
        (Blocker(0, 0, sand_level=2), 3, BlockerChange.CLEARED, None),
    ],
    ids=[
        "umbrella-once",
        "umbrella-once-deep",
        "umbrella-twice-shallow",
        "umbrella-twice-deep",
        "umbrella-twice-level-two",
        "umbrella-thrice-level-two",
        "plain",
        "deep-first-hit",
        "deep-second-hit",
        "deep-overkill",
    ],
)
def test_apply_hits(blocker: Blocker, count: int, change: BlockerChange, after) -> None:
    assert apply_hits(blocker, count) == (after, change)


def test_damage_persists_across_turns() -> None:
    blockers = (Blocker(1, 1, sand_level=2),)
    first = update_blockers([ROW0], blockers)
    assert first.deltas[0].kind is BlockerChange.DAMAGED
    assert first.blockers == (Blocker(1, 1, sand_level=2, hits=1),)

    second = update_blockers([ROW0], first.blockers)
    assert second.cleared == [(1, 1)]
    assert second.blockers == ()


def test_untouched_blockers_are_kept_in_order() -> None:
    blockers = (Blocker(6, 6), Blocker(1, 1), Blocker(7, 0, has_umbrella=True))
    update = update_blockers([ROW0], blockers)
    assert update.blockers == (Blocker(6, 6), Blocker(7, 0, has_umbrella=True))
    assert update.cleared == [(1, 1)]


def test_no_matches_no_changes() -> None:
    blockers = (Blocker(1, 1),)
    update = update_blockers([], blockers)
    assert update.blockers == blockers
    assert update.deltas == [] and update.revealed == []


def test_cleared_treasure_pile_reveals_treasure() -> None:
    update = update_blockers([ROW0], [Blocker(1, 1, has_treasure=True)], TileSource.seeded(4))

    assert update.blockers == ()
    [tile] = update.revealed
    assert tile.type in TREASURE_TYPES
    assert (tile.row, tile.col) == (1, 1)
    [delta] = update.deltas
    assert delta.kind is BlockerChange.CLEARED
    assert delta.treasure is tile.type


def test_umbrella_keeps_treasure_hidden() -> None:
    update = update_blockers([ROW0], [Blocker(1, 1, has_umbrella=True, has_treasure=True)])
    assert update.revealed == []
    assert update.blockers == (Blocker(1, 1, has_treasure=True),)


@pytest.mark.parametrize(
    "rounds",
    [(1, 1, 1), (2, 1), (1, 2), (3,)],
    ids=["one-at-a-time", "two-then-one", "one-then-two", "all-at-once"],
)
def test_umbrella_pile_needs_same_charges_however_spread(rounds: tuple[int, ...]) -> None:
    blocker = Blocker(0, 0, sand_level=2, has_umbrella=True)
    for count in rounds[:-1]:
        blocker, change = apply_hits(blocker, count)
        assert blocker is not None, change
    assert apply_hits(blocker, rounds[-1]) == (None, BlockerChange.CLEARED)

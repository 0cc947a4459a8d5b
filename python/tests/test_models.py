"""Board, tile and blocker records."""

from __future__ import annotations

import pytest

from beachmatch.config import DEFAULT_CONFIG
from beachmatch.errors import BeachMatchError, InvalidLayoutError
from beachmatch.models.blocker import Blocker
from beachmatch.models.grid import Grid, Move, are_adjacent, orthogonal_neighbors
from beachmatch.models.tile import SAND_TYPES, SEA_TYPES, TileType, Variant, palette_for

from boards import board


def test_grid_shape_is_checked() -> None:
    with pytest.raises(InvalidLayoutError):
        Grid(cells=[[None] * 8] * 7)
    with pytest.raises(BeachMatchError):
        Grid.from_codes(["C" * 7] * 8)


def test_codes_round_trip_through_pretty() -> None:
    rows = ["CPTHSQRB", "JFODNAGC"] + ["CPCPCPCP", "THTHTHTH"] * 3
    assert Grid.from_codes(rows).pretty().splitlines() == rows


def test_unknown_code() -> None:
    with pytest.raises(ValueError):
        TileType.from_code("?")


def test_swap_restamps_coordinates() -> None:
    grid = board()
    a, b = grid.at((0, 0)), grid.at((0, 1))

    grid.swap((0, 0), (0, 1))

    assert grid.at((0, 1)).id == a.id and (grid.at((0, 1)).row, grid.at((0, 1)).col) == (0, 1)
    assert grid.at((0, 0)).id == b.id


def test_copy_is_independent() -> None:
    grid = board()
    clone = grid.copy()
    clone.remove((3, 3))
    assert grid.at((3, 3)) is not None


def test_adjacency() -> None:
    assert are_adjacent((2, 2), (2, 3))
    assert not are_adjacent((2, 2), (3, 3))
    assert not are_adjacent((2, 2), (2, 2))
    assert Move((0, 0), (1, 0)).is_adjacent
    assert Move((0, 0), (1, 0)).reversed() == Move((1, 0), (0, 0))
    assert sorted(orthogonal_neighbors((0, 0))) == [(0, 1), (1, 0)]


def test_palettes() -> None:
    assert palette_for(Variant.SAND) == SAND_TYPES
    assert palette_for("sea") == SEA_TYPES
    assert not any(t.is_exiting or t.is_treasure for t in SAND_TYPES + SEA_TYPES)
    assert TileType.COCONUT.is_exiting
    assert TileType.RING.is_treasure


def test_blocker_needs_sand() -> None:
    with pytest.raises(ValueError):
        Blocker(0, 0, sand_level=0)
    assert Blocker(0, 0, sand_level=2, has_umbrella=True).remaining == 3


@pytest.mark.parametrize("length, points", [(3, 30), (4, 45), (5, 60), (25, 360)])
def test_match_score(length: int, points: int) -> None:
    assert DEFAULT_CONFIG.match_score(length) == points

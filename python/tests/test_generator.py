"""Board generation, level layouts and redeals."""

from __future__ import annotations

import pytest

from beachmatch.config import EngineConfig
from beachmatch.engine.gamegenerator import (
    BoardGenerator,
    TileSource,
    create_board_from_layout,
    create_valid_board,
    redeal_board,
)
from beachmatch.engine.matching import find_matches, get_valid_moves
from beachmatch.errors import BoardGenerationError, InvalidLayoutError
from beachmatch.models.blocker import Blocker
from beachmatch.models.tile import TileType, Variant, palette_for

from boards import board, layout


@pytest.mark.parametrize("variant", list(Variant))
@pytest.mark.parametrize("seed", range(4))
def test_fresh_board_is_playable(variant: Variant, seed: int) -> None:
    grid = create_valid_board(variant, source=TileSource.seeded(seed))

    assert find_matches(grid) == []
    assert get_valid_moves(grid)
    assert grid.empty_cells() == []
    assert {t.type for t in grid.tiles()} <= set(palette_for(variant))
    assert len({t.id for t in grid.tiles()}) == 64


def test_blocker_cells_stay_empty() -> None:
    blockers = [Blocker(0, 0), Blocker(3, 5, sand_level=2), Blocker(7, 7, has_umbrella=True)]
    grid = create_valid_board(Variant.SAND, blockers, TileSource.seeded(1), require_move=False)

    assert sorted(grid.empty_cells()) == [(0, 0), (3, 5), (7, 7)]
    assert find_matches(grid) == []


def test_generation_gives_up() -> None:
    with pytest.raises(BoardGenerationError):
        BoardGenerator.generate(config=EngineConfig(max_generation_attempts=0))


# -- level layouts ------------------------------------------------------------


def test_layout_matches_are_rerolled() -> None:
    rows = layout("SSS", "", "", "...O")
    grid = create_board_from_layout(rows, Variant.SAND, source=TileSource.seeded(2))

    assert find_matches(grid) == []
    assert grid.at((3, 3)).id == "3-3"
    assert grid.at((3, 3)).type is TileType.COCONUT
    assert grid.at((5, 5)).id == "5-5"


def test_layout_blocker_cells_are_forced_empty() -> None:
    grid = create_board_from_layout(layout(), blockers=[Blocker(2, 2)])
    assert grid.empty_cells() == [(2, 2)]


def test_layout_shape_is_checked() -> None:
    with pytest.raises(InvalidLayoutError):
        create_board_from_layout([[TileType.CRAB] * 8] * 7)
    with pytest.raises(ValueError):
        create_board_from_layout([[TileType.CRAB] * 9] * 8)


def test_layout_repair_gives_up() -> None:
    with pytest.raises(BoardGenerationError):
        create_board_from_layout(layout("SSS"), config=EngineConfig(max_generation_attempts=0))


# -- redeal -------------------------------------------------------------------


def test_redeal_keeps_coconuts_and_blockers() -> None:
    grid = board("", "", "..O", "", "", ".....#")
    blockers = [Blocker(5, 5)]

    out = redeal_board(grid, blockers, Variant.SEA, TileSource.seeded(5))

    assert out.at((2, 2)).id == "2-2"
    assert out.empty_cells() == [(5, 5)]
    assert find_matches(out) == []
    regular = [t for t in out.tiles() if not t.is_exiting]
    assert all(t.type in palette_for(Variant.SEA) for t in regular)
    assert all(t.id.startswith("t") for t in regular)

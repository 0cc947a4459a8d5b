"""Game sessions, running totals and move hints."""

from __future__ import annotations

from beachmatch.engine.gamegenerator import TileSource
from beachmatch.engine.gameplay import GamePlay
from beachmatch.engine.gamesolver import Solver
from beachmatch.engine.gamestate import GameState
from beachmatch.engine.matching import find_matches, get_valid_moves, is_valid_move
from beachmatch.engine.specials import detect_special_trigger
from beachmatch.models.blocker import Blocker
from beachmatch.models.grid import Move
from beachmatch.models.tile import Variant
from beachmatch.models.turn import TriggerKind, TurnResult

from boards import board

PLAIN = ("SS", "..S")
BOMB = ("..S..", "..S..", "SS.SS")


# -- session ------------------------------------------------------------------


def test_new_game_starts_at_rest() -> None:
    game = GamePlay(Variant.SEA, [Blocker(4, 4)], seed=3)

    assert find_matches(game.grid) == []
    assert get_valid_moves(game.grid)
    assert game.grid.at((4, 4)) is None
    assert game.state.moves == 0 and game.state.score == 0
    assert game.state.blockers_left == 1


def test_seeded_games_match() -> None:
    assert GamePlay(seed=42).grid.pretty() == GamePlay(seed=42).grid.pretty()


def test_invalid_swap_is_refused() -> None:
    game = GamePlay.from_grid(board(*PLAIN), source=TileSource.seeded(1))
    before = game.grid.pretty()

    assert game.swap((7, 0), (7, 1)) is None
    assert game.swap((0, 0), (5, 5)) is None
    assert game.grid.pretty() == before
    assert game.state.moves == 0


def test_valid_swap_updates_totals() -> None:
    game = GamePlay.from_grid(board(*PLAIN), source=TileSource.seeded(2))

    result = game.swap((1, 2), (0, 2))

    assert result is not None
    assert game.grid is result.grid
    assert game.state.moves == 1
    assert game.state.score == result.score
    assert game.state.collected_tiles == result.collected_tiles >= 3
    assert game.state.combos == result.rounds - 1
    assert game.state.last_result is result


def test_reverted_result_does_not_count() -> None:
    grid = board(*PLAIN)
    state = GameState(grid)

    state.apply(TurnResult(grid=board(), blockers=(), swap_reverted=True, score=99))

    assert state.grid is grid
    assert state.moves == 0 and state.score == 0


def test_state_tracks_blockers() -> None:
    state = GameState(board(), (Blocker(1, 1),))
    assert not state.is_clear

    state.apply(TurnResult(grid=board(), blockers=(), reshuffled=True))

    assert state.is_clear
    assert state.reshuffles == 1


# -- solver -------------------------------------------------------------------


def test_hint_prefers_bomb() -> None:
    grid = board(*BOMB)
    hint = Solver.hint(grid)

    assert hint is not None
    assert detect_special_trigger(grid, hint).kind is TriggerKind.BOMB
    assert Solver.score_move(grid, Move((2, 3), (2, 2)))[0] == 2


def test_hint_on_plain_board() -> None:
    grid = board(*PLAIN)
    hint = Solver.hint(grid)

    assert hint is not None
    assert is_valid_move(grid, hint.origin, hint.dest)
    assert Solver.rank_moves(grid)[0] == hint


def test_no_hint_when_deadlocked() -> None:
    assert Solver.hint(board()) is None
    assert Solver.rank_moves(board()) == []

from beachmatch.engine.deadlock.reshuffle import check_if_game_impossible, is_playable, rearrange_board

__all__ = ["check_if_game_impossible", "is_playable", "rearrange_board"]

from beachmatch.engine.gamestate.state import GameState

__all__ = ["GameState"]

from beachmatch.engine.specials.triggers import (
    detect_bomb_trigger,
    detect_rocket_trigger,
    detect_special_trigger,
    get_bomb_explosion_tiles,
    get_rocket_explosion_tiles,
)

__all__ = [
    "detect_bomb_trigger",
    "detect_rocket_trigger",
    "detect_special_trigger",
    "get_bomb_explosion_tiles",
    "get_rocket_explosion_tiles",
]

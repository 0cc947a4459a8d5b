from beachmatch.models.blocker import Blocker, BlockerChange, BlockerDelta
from beachmatch.models.grid import BOARD_SIZE, Coord, Grid, Match, Move
from beachmatch.models.tile import Tile, TileType, Variant, palette_for
from beachmatch.models.turn import ExitEvent, SpecialTrigger, TriggerKind, TurnResult

__all__ = [
    "BOARD_SIZE",
    "Blocker",
    "BlockerChange",
    "BlockerDelta",
    "Coord",
    "ExitEvent",
    "Grid",
    "Match",
    "Move",
    "SpecialTrigger",
    "Tile",
    "TileType",
    "TriggerKind",
    "TurnResult",
    "Variant",
    "palette_for",
]

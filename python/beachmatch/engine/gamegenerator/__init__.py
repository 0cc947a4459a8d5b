from beachmatch.engine.gamegenerator.generator import (
    BoardGenerator,
    create_board_from_layout,
    create_valid_board,
    redeal_board,
)
from beachmatch.engine.gamegenerator.source import TileSource

__all__ = [
    "BoardGenerator",
    "TileSource",
    "create_board_from_layout",
    "create_valid_board",
    "redeal_board",
]

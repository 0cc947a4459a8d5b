from beachmatch.engine.matching.detector import find_matches, is_horizontal, is_vertical, run_length
from beachmatch.engine.matching.validator import get_valid_moves, is_valid_move

__all__ = [
    "find_matches",
    "get_valid_moves",
    "is_horizontal",
    "is_valid_move",
    "is_vertical",
    "run_length",
]

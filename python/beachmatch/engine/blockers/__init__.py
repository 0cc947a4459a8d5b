from beachmatch.engine.blockers.sand import BlockerUpdate, apply_hits, count_adjacent_hits, update_blockers

__all__ = ["BlockerUpdate", "apply_hits", "count_adjacent_hits", "update_blockers"]

from beachmatch.engine.cascade.orchestrator import drain_exits, process_turn

__all__ = ["drain_exits", "process_turn"]

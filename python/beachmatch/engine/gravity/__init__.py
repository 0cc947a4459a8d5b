from beachmatch.engine.gravity.gravity import column_sections, drop_tiles

__all__ = ["column_sections", "drop_tiles"]

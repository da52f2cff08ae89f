"""Application layer: applying filters to collections, reporting."""

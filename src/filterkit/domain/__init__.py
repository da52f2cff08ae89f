"""Domain layer: filter algebra and errors."""

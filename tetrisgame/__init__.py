"""A falling-blocks puzzle game: rules, pieces, drawing and a pygame game loop."""

__version__ = "0.1.0"
__all__ = ["blocks", "pieces", "model", "primlib", "view", "game"]
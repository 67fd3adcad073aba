"""A console snake game with obstacles, a high-score table and terminal helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "game", "obstacles", "score", "terminal"]
"""The matchstick game of Nim, played in the terminal."""

__version__ = "0.1.0"
__all__ = ["engine", "game", "duel", "classic"]
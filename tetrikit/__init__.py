"""Tetris board model, SRS rotation system, game state and placement search."""

__version__ = "0.1.0"
"""Scoring model for a poker-style deck-building card game."""

__version__ = "0.1.0"

__all__ = ["blind", "cards", "edition", "hands", "jokers", "score"]
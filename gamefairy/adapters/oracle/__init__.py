"""Oracle adapters for proclaiming game outcomes."""

from .game_fairy import GameFairy

__all__ = ["GameFairy"]

"""Domain models for the Game Fairy project."""

from enum import Enum


class MysticVision(Enum):
    """Visions a game fairy can interpret.

    Anything the fairy sees that is not one of these values leaves the
    outcome indeterminate.
    """

    TIE = "tie"
    WIN = "win"

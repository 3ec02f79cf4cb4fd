"""Core domain logic for the Game Fairy project.

This package contains zero external dependencies. Concrete oracle and
gateway implementations live in the adapters package.
"""

from .errors import (
    DuplicateStubError,
    GameFairyError,
    IndeterminateOracleError,
    StubError,
    StubStateError,
    UnknownOperationError,
)
from .game import Game
from .models import MysticVision
from .ports import GatewayPort, OraclePort

__all__ = [
    "DuplicateStubError",
    "Game",
    "GameFairyError",
    "GatewayPort",
    "IndeterminateOracleError",
    "MysticVision",
    "OraclePort",
    "StubError",
    "StubStateError",
    "UnknownOperationError",
]

"""Gateway adapters that hand out oracles."""

from .game_fairy_gateway import GameFairyGateway

__all__ = ["GameFairyGateway"]

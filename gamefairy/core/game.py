"""The game whose completion is decided by an oracle."""

import logging

from .ports import GatewayPort

logger = logging.getLogger(__name__)


class Game:
    """Asks an oracle, via the gateway, whether the game is done.

    Holds nothing but the gateway reference.
    """

    def __init__(self, gateway: GatewayPort):
        self.gateway = gateway

    def is_done(self) -> bool:
        """Return the oracle's proclamation verbatim.

        The oracle is re-resolved on every call. Errors raised by the
        gateway or the oracle propagate unchanged.
        """
        oracle = self.gateway.get_oracle()
        logger.debug(f"Resolved oracle {type(oracle).__name__} from gateway")
        return oracle.proclamation()

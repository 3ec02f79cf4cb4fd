"""Port interfaces for the Game Fairy project.

These abstract base classes define the boundaries between the game and
its collaborators. Implementations live in the adapters/ package; test
doubles live in tests/fakes/.

Both ports are driven ports: the game calls out through them.
   - GatewayPort: hands out oracles
   - OraclePort: proclaims whether the game is over
"""

from abc import ABC, abstractmethod


class OraclePort(ABC):
    """Port for an oracle that knows whether a game has been decided.

    The game trusts the answer without validation. Doubles only need a
    ``proclamation`` method; subclassing is not required at the call site.
    """

    @abstractmethod
    def proclamation(self) -> bool:
        """Proclaim the outcome of the game.

        Returns:
            False when the outcome is a tie, True when it is a win.

        Raises:
            IndeterminateOracleError: If the oracle cannot tell.
        """


class GatewayPort(ABC):
    """Port for looking up an oracle."""

    @abstractmethod
    def get_oracle(self) -> OraclePort:
        """Return an oracle to consult.

        Implementations should build a fresh oracle on every call; the
        game never caches the value.
        """

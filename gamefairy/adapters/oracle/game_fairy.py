"""Game fairy oracle.

Implements OraclePort by interpreting a mystic visions string.
"""

import logging

from gamefairy.core.errors import IndeterminateOracleError
from gamefairy.core.models import MysticVision
from gamefairy.core.ports import OraclePort

logger = logging.getLogger(__name__)


class GameFairy(OraclePort):
    """Reads the game's fate from its mystic visions."""

    def __init__(self, mystic_visions: str = MysticVision.TIE.value):
        """Initialize the fairy.

        Args:
            mystic_visions: What the fairy sees. "tie" and "win" are
                understood; anything else is indeterminate.
        """
        self.mystic_visions = mystic_visions

    def proclamation(self) -> bool:
        """Proclaim whether the game was won.

        Raises:
            IndeterminateOracleError: If the visions are unrecognized.
        """
        if self.mystic_visions == MysticVision.TIE.value:
            return False
        if self.mystic_visions == MysticVision.WIN.value:
            return True

        logger.warning(f"Indeterminate visions: {self.mystic_visions!r}")
        raise IndeterminateOracleError(self.mystic_visions)

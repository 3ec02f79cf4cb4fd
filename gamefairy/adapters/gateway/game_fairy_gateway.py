"""Gateway that builds a fresh GameFairy on every lookup."""

from gamefairy.adapters.oracle.game_fairy import GameFairy
from gamefairy.core.models import MysticVision
from gamefairy.core.ports import GatewayPort


class GameFairyGateway(GatewayPort):
    """Hands out game fairies seeded with the configured visions."""

    def __init__(self, mystic_visions: str = MysticVision.TIE.value):
        self.mystic_visions = mystic_visions

    def get_oracle(self) -> GameFairy:
        return GameFairy(mystic_visions=self.mystic_visions)

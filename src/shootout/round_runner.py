"""Round runner - shoots all five racks for one player."""

import logging
import random
from typing import Optional

from src.shootout.config import RACK_COUNT
from src.shootout.models import Player, RoundResult
from src.shootout.rack_simulator import RackSimulator, StarryBallSimulator
from src.shootout.shot_resolver import ShotResolver

logger = logging.getLogger(__name__)


class RoundRunner:
    """Runs racks 1 through 5 in order and totals the score.

    Each rack is shot by RackSimulator; racks 2 and 3 also get a starry ball
    from StarryBallSimulator. Both share one ShotResolver, so every draw for
    a round comes from the same random source in shooting order.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        resolver = ShotResolver(rng)
        self.rack_simulator = RackSimulator(resolver)
        self.starry_simulator = StarryBallSimulator(resolver)

    def play_round(self, player: Player) -> RoundResult:
        """Shoot a full round for ``player`` and record the total on it.

        Returns:
            RoundResult holding every rack in shooting order.
        """
        result = RoundResult(player_number=player.player_number)

        for position in range(1, RACK_COUNT + 1):
            rack = self.rack_simulator.simulate(
                position,
                is_money_ball_rack=(position == player.money_ball_rack),
                shooting_capability=player.shooting_capability,
            )
            rack.starry_shot = self.starry_simulator.simulate(
                position, player.shooting_capability
            )
            result.racks.append(rack)

        player.total_score = result.total_score

        logger.info(
            "Player %d finished (capability=%d, money rack=%d): %d pts",
            player.player_number,
            player.shooting_capability,
            player.money_ball_rack,
            player.total_score,
        )
        return result

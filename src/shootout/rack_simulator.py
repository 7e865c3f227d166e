"""Rack and starry-ball simulation."""

import logging
from typing import List, Optional

from src.shootout.config import (
    BALLS_PER_RACK,
    MONEY_BALL_INDEX,
    RACK_COUNT,
    STARRY_RACKS,
)
from src.shootout.models import RackResult, Shot, ShotOutcome
from src.shootout.shot_resolver import ShotResolver

logger = logging.getLogger(__name__)


def _check_position(position: int):
    if not 1 <= position <= RACK_COUNT:
        raise ValueError(f"Rack position ({position}) must be between 1 and {RACK_COUNT}")


class RackSimulator:
    """Shoots the five regular balls of a rack.

    Scoring table:

    * money-ball rack: every made ball is worth 2 (max 10)
    * any other rack: balls 1-4 are worth 1, the last ball is worth 2 (max 6)
    """

    def __init__(self, resolver: ShotResolver):
        self.resolver = resolver

    def simulate(
        self, position: int, is_money_ball_rack: bool, shooting_capability: int
    ) -> RackResult:
        """Shoot one rack.

        Returns:
            RackResult with five shots and no starry ball; the caller
            attaches the starry shot for starry racks.
        """
        _check_position(position)

        shots: List[Shot] = []
        for index in range(BALLS_PER_RACK):
            success = self.resolver.is_successful(shooting_capability)
            shots.append(Shot(success, self._outcome(index, is_money_ball_rack, success)))

        result = RackResult(
            position=position,
            is_money_ball_rack=is_money_ball_rack,
            shots=shots,
        )
        logger.debug(
            "Rack %d (money=%s): %s -> %d pts",
            position,
            is_money_ball_rack,
            "".join(shot.outcome.symbol for shot in shots),
            result.rack_points,
        )
        return result

    @staticmethod
    def _outcome(index: int, is_money_ball_rack: bool, success: bool) -> ShotOutcome:
        if not success:
            return ShotOutcome.MISS
        if is_money_ball_rack or index == MONEY_BALL_INDEX:
            return ShotOutcome.HIT_MONEY
        return ShotOutcome.HIT_NORMAL


class StarryBallSimulator:
    """Shoots the bonus starry ball that follows racks 2 and 3."""

    def __init__(self, resolver: ShotResolver):
        self.resolver = resolver

    @staticmethod
    def is_starry_rack(position: int) -> bool:
        return position in STARRY_RACKS

    def simulate(self, position: int, shooting_capability: int) -> Optional[Shot]:
        """Return the starry shot for ``position``, or None if it has none."""
        _check_position(position)
        if not self.is_starry_rack(position):
            return None

        success = self.resolver.is_successful(shooting_capability)
        outcome = ShotOutcome.STARRY_HIT if success else ShotOutcome.STARRY_MISS
        logger.debug("Starry ball after rack %d: %s", position, outcome.value)
        return Shot(success, outcome)

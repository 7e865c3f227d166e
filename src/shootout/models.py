"""Contest data models - shots, racks, rounds and match results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from src.shootout.config import (
    MONEY_BALL_POINTS,
    NORMAL_BALL_POINTS,
    STARRY_BALL_POINTS,
)
from src.shootout.input_rules import (
    check_rack_choice,
    check_shooting_capability,
    require_valid,
)


class ShotOutcome(str, Enum):
    """Result tag for a single ball."""

    HIT_NORMAL = "hit-normal"
    HIT_MONEY = "hit-money"
    MISS = "miss"
    STARRY_HIT = "starry-hit"
    STARRY_MISS = "starry-miss"

    @property
    def symbol(self) -> str:
        """Character shown on the rack line."""
        return _SYMBOLS[self]

    @property
    def points(self) -> int:
        return _POINTS[self]


_SYMBOLS = {
    ShotOutcome.HIT_NORMAL: "X",
    ShotOutcome.HIT_MONEY: "M",
    ShotOutcome.MISS: "_",
    ShotOutcome.STARRY_HIT: "S",
    ShotOutcome.STARRY_MISS: "_",
}

_POINTS = {
    ShotOutcome.HIT_NORMAL: NORMAL_BALL_POINTS,
    ShotOutcome.HIT_MONEY: MONEY_BALL_POINTS,
    ShotOutcome.MISS: 0,
    ShotOutcome.STARRY_HIT: STARRY_BALL_POINTS,
    ShotOutcome.STARRY_MISS: 0,
}


@dataclass(frozen=True)
class Shot:
    """A single resolved ball."""

    success: bool
    outcome: ShotOutcome

    @property
    def points(self) -> int:
        return self.outcome.points


@dataclass
class RackResult:
    """Outcome of one rack: five regular balls plus an optional starry ball."""

    position: int
    is_money_ball_rack: bool
    shots: List[Shot] = field(default_factory=list)
    starry_shot: Optional[Shot] = None

    @property
    def is_starry_rack(self) -> bool:
        return self.starry_shot is not None

    @property
    def rack_points(self) -> int:
        """Points from the five regular balls (what the rack line shows)."""
        return sum(shot.points for shot in self.shots)

    @property
    def starry_points(self) -> int:
        return self.starry_shot.points if self.starry_shot else 0

    @property
    def total_points(self) -> int:
        return self.rack_points + self.starry_points


@dataclass
class RoundResult:
    """A player's five racks in shooting order."""

    player_number: int
    racks: List[RackResult] = field(default_factory=list)

    @property
    def total_score(self) -> int:
        return sum(rack.total_points for rack in self.racks)


@dataclass
class Player:
    """One contestant's settings and running score for the current match."""

    player_number: int
    shooting_capability: int
    money_ball_rack: int
    total_score: int = 0

    def __post_init__(self):
        require_valid(
            check_shooting_capability, self.shooting_capability, "shooting_capability"
        )
        require_valid(check_rack_choice, self.money_ball_rack, "money_ball_rack")


@dataclass
class MatchResult:
    """Final scores for one match, keyed by player number."""

    scores: Dict[int, int]
    rounds: List[RoundResult] = field(default_factory=list)

    @classmethod
    def from_rounds(cls, rounds: List[RoundResult]) -> "MatchResult":
        """Factory method building the score table from finished rounds."""
        if not rounds:
            raise ValueError("rounds cannot be empty")
        numbers = [r.player_number for r in rounds]
        duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate player numbers in match: {duplicates}")
        scores = {r.player_number: r.total_score for r in rounds}
        return cls(scores=scores, rounds=list(rounds))

    @property
    def highest_score(self) -> int:
        return max(self.scores.values())

    @property
    def winner_number(self) -> int:
        """First player (in shooting order) holding the highest score."""
        return self.tied_players[0]

    @property
    def tied_players(self) -> List[int]:
        """All players holding the highest score, in shooting order."""
        best = self.highest_score
        return [number for number, score in self.scores.items() if score == best]

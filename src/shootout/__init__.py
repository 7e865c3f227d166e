from src.shootout.console import Console
from src.shootout.input_rules import ValidationError
from src.shootout.match_controller import MatchController
from src.shootout.models import (
    MatchResult,
    Player,
    RackResult,
    RoundResult,
    Shot,
    ShotOutcome,
)
from src.shootout.rack_simulator import RackSimulator, StarryBallSimulator
from src.shootout.round_runner import RoundRunner
from src.shootout.shot_resolver import ShotResolver

__all__ = [
    "Console",
    "MatchController",
    "MatchResult",
    "Player",
    "RackResult",
    "RackSimulator",
    "RoundResult",
    "RoundRunner",
    "Shot",
    "ShotOutcome",
    "ShotResolver",
    "StarryBallSimulator",
    "ValidationError",
]

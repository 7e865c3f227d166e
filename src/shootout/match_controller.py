"""Match controller - collects player settings, runs rounds, picks the high score."""

import logging
import random
from typing import List, Optional

from src.shootout.config import (
    CAPABILITY_PROMPT,
    MIN_PLAYERS,
    PLAYER_COUNT_PROMPT,
    RACK_CHOICE_PROMPT,
)
from src.shootout.console import Console
from src.shootout.display import format_highest_score, format_round, format_turn_banner
from src.shootout.input_rules import (
    check_player_count,
    check_rack_choice,
    check_shooting_capability,
)
from src.shootout.models import MatchResult, Player, RoundResult
from src.shootout.round_runner import RoundRunner

logger = logging.getLogger(__name__)


class MatchController:
    """Main controller for a single match.

    Coordinates between Console (prompts and output), RoundRunner
    (simulation) and MatchResult (scoring) for N >= 2 players taking their
    turns one after another.
    """

    def __init__(self, console: Console, rng: Optional[random.Random] = None):
        self.console = console
        self.round_runner = RoundRunner(rng)

    def play(self) -> Optional[MatchResult]:
        """Run one interactive match.

        Returns:
            The MatchResult, or None when the player count was rejected
            (the caller restarts at the player-count prompt).
        """
        player_count, error = self.console.ask_once(PLAYER_COUNT_PROMPT, check_player_count)
        if error is not None:
            logger.info("Match skipped: %s", error)
            return None

        logger.info("Starting match with %d players", player_count)
        rounds = []
        for number in range(1, player_count + 1):
            player = self.configure_player(number)
            rounds.append(self.play_turn(player))

        return self._finish(rounds)

    def configure_player(self, player_number: int) -> Player:
        """Ask one player for their money-ball rack and shooting capability."""
        self.console.say(format_turn_banner(player_number))
        money_ball_rack = self.console.ask(RACK_CHOICE_PROMPT, check_rack_choice)
        shooting_capability = self.console.ask(CAPABILITY_PROMPT, check_shooting_capability)
        return Player(
            player_number=player_number,
            shooting_capability=shooting_capability,
            money_ball_rack=money_ball_rack,
        )

    def play_turn(self, player: Player) -> RoundResult:
        """Shoot one player's round and print it."""
        round_result = self.round_runner.play_round(player)
        self.console.say_all(format_round(round_result))
        return round_result

    def run_match(self, players: List[Player]) -> MatchResult:
        """Run a match for already-configured players, in list order.

        Raises:
            ValueError: If fewer than two players are given, or two players
                share a player number.
        """
        if len(players) < MIN_PLAYERS:
            raise ValueError(
                f"A match needs at least {MIN_PLAYERS} players, got {len(players)}"
            )
        numbers = [p.player_number for p in players]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"Player numbers must be unique, got {numbers}")
        rounds = [self.play_turn(player) for player in players]
        return self._finish(rounds)

    def _finish(self, rounds: List[RoundResult]) -> MatchResult:
        result = MatchResult.from_rounds(rounds)
        self.console.say(format_highest_score(result))
        logger.info(
            "Match complete: scores=%s, highest=%d (players %s)",
            result.scores,
            result.highest_score,
            result.tied_players,
        )
        return result

"""Run the shooting contest from the terminal.

Usage:
    python -m src.shootout.session

Set SHOOTOUT_LOG_LEVEL (e.g. INFO) to echo log records to stderr.
"""

import logging
import os
import random
import sys
import time
from typing import List, Optional

from src.logging_config import setup_logging
from src.shootout.config import (
    DEFAULT_LOG_LEVEL,
    FAREWELL_MESSAGE,
    LOG_LEVEL_ENV_VAR,
    PLAY_AGAIN_PROMPT,
    PLAY_AGAIN_YES,
)
from src.shootout.console import Console
from src.shootout.input_rules import check_play_again
from src.shootout.match_controller import MatchController
from src.shootout.models import MatchResult

logger = logging.getLogger(__name__)


class SessionLoop:
    """Plays matches until the user declines to continue.

    A rejected player count restarts the loop at the player-count prompt
    without asking to play again.
    """

    def __init__(self, console: Console, rng: Optional[random.Random] = None):
        self.console = console
        self.controller = MatchController(console, rng)
        self.results: List[MatchResult] = []

    def run(self) -> List[MatchResult]:
        """Run matches until the user answers no, then say goodbye.

        Returns:
            Results of every completed match, in order.
        """
        logger.info("Session started")
        keep_playing = True
        while keep_playing:
            result = self.controller.play()
            if result is None:
                continue
            self.results.append(result)
            keep_playing = self.ask_play_again()

        self.console.say(FAREWELL_MESSAGE)
        logger.info("Session ended after %d match(es)", len(self.results))
        return self.results

    def ask_play_again(self) -> bool:
        return self.console.ask(PLAY_AGAIN_PROMPT, check_play_again) == PLAY_AGAIN_YES


def main() -> int:
    rng = random.Random(time.time_ns())
    console = Console()

    try:
        setup_logging(os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        SessionLoop(console, rng).run()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, ending session")
        console.say("")
        console.say(FAREWELL_MESSAGE)
    except Exception:
        logger.exception("Session failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

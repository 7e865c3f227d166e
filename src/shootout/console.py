"""Console I/O wrapper with re-prompting input."""

import logging
from typing import Callable, Iterable, Optional

from src.shootout.input_rules import CheckResult

logger = logging.getLogger(__name__)


class Console:
    """Reads answers and writes lines through injectable callables.

    Defaults to ``input`` and ``print``; tests pass scripted replacements.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def say(self, line: str) -> None:
        self.output_fn(line)

    def say_all(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.output_fn(line)

    def ask(self, prompt: str, check: Callable[[str], CheckResult]) -> int:
        """Prompt until ``check`` accepts the answer.

        There is no attempt limit. EOFError from the input callable
        propagates to the caller.
        """
        while True:
            raw = self.input_fn(prompt)
            value, error = check(raw)
            if error is None:
                return value
            logger.debug("Rejected input %r for prompt %r", raw, prompt.strip())
            self.say(error)

    def ask_once(self, prompt: str, check: Callable[[str], CheckResult]) -> CheckResult:
        """Prompt a single time, printing the error if the answer is rejected."""
        raw = self.input_fn(prompt)
        value, error = check(raw)
        if error is not None:
            logger.debug("Rejected input %r for prompt %r", raw, prompt.strip())
            self.say(error)
        return value, error

"""Shared fixtures for the shooting contest test suite."""

import random

import pytest

from src.shootout.console import Console


class ScriptedRng:
    """Stand-in for random.Random whose randrange returns queued rolls.

    A roll of 0 makes any shot with capability >= 1 go in; a roll of 99
    misses any shot with capability <= 99. When the queue runs dry the
    ``default`` roll repeats.
    """

    def __init__(self, rolls=(), default=None):
        self.rolls = list(rolls)
        self.default = default
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        if self.rolls:
            return self.rolls.pop(0)
        if self.default is None:
            raise AssertionError("ScriptedRng ran out of rolls")
        return self.default


class ScriptedConsole(Console):
    """Console fed from a list of answers, recording prompts and output."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []
        super().__init__(input_fn=self._next_answer, output_fn=self.lines.append)

    def _next_answer(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


# ------------------------------------------------------------------
# Random sources
# ------------------------------------------------------------------

@pytest.fixture
def hit_rng():
    """Every shot goes in."""
    return ScriptedRng(default=0)


@pytest.fixture
def miss_rng():
    """Every shot misses."""
    return ScriptedRng(default=99)


@pytest.fixture
def scripted_rng():
    """Factory for an RNG with explicit rolls."""
    return ScriptedRng


@pytest.fixture
def seeded_rng():
    return random.Random(20240217)


# ------------------------------------------------------------------
# Console
# ------------------------------------------------------------------

@pytest.fixture
def scripted_console():
    """Factory for a console answering from a list."""
    return ScriptedConsole

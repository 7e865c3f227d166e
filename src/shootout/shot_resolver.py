"""Single-shot resolution against a shooting capability."""

import random
from typing import Optional

from src.shootout.config import PERCENT_SCALE


class ShotResolver:
    """Decides whether one ball goes in.

    Draws a uniform integer in ``[0, 100)`` from the injected random source
    and compares it against the capability percentage. Range checking of the
    capability is the caller's job.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def is_successful(self, shooting_capability: int) -> bool:
        return self.rng.randrange(PERCENT_SCALE) < shooting_capability

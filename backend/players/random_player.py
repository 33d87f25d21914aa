"""
Random player implementation - wanders by holding random keys.
"""

import random
from typing import Optional, Set

from domain.constants import LEFT, RIGHT
from domain.game_state import GameState
from .base import Player

# Rotation samples between changes of mind
HOLD_SAMPLES = 10


class RandomPlayer(Player):
    """
    Holds LEFT, RIGHT or nothing, picking again every HOLD_SAMPLES samples.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None, hold_samples: int = HOLD_SAMPLES):
        self.rng = rng or random.Random()
        self.hold_samples = hold_samples
        self._current: Set[str] = set()
        self._remaining = 0

    def get_keys(self, game_state: GameState) -> Set[str]:
        if self._remaining <= 0:
            self._current = self.rng.choice([set(), {LEFT}, {RIGHT}])
            self._remaining = self.hold_samples
        self._remaining -= 1
        return set(self._current)

"""
Heading controller: turns held steering keys into a direction of travel.
"""

import math
from typing import Iterable, Set, Tuple

from .constants import LEFT, RIGHT, SPEED, TURN_STEP, VALID_KEYS


class Heading:
    """
    Current direction of travel in degrees, in [0, 360).

    Screen coordinates are used, so y grows downward and holding RIGHT
    turns clockwise on screen.
    """

    def __init__(self, degree: float = 0.0):
        self.degree = degree
        self.held: Set[str] = set()

    def press(self, key: str) -> None:
        if key in VALID_KEYS:
            self.held.add(key)

    def release(self, key: str) -> None:
        self.held.discard(key)

    def set_held(self, keys: Iterable[str]) -> None:
        """Replace the held set with a fresh sample from the input source."""
        self.held = {key for key in keys if key in VALID_KEYS}

    def rotate(self) -> None:
        """Apply one rotation tick. RIGHT wins when both keys are held."""
        if RIGHT in self.held:
            self.degree += TURN_STEP
            if self.degree >= 360.0:
                self.degree = 0.0
        elif LEFT in self.held:
            self.degree -= TURN_STEP
            if self.degree < 0:
                self.degree = 360.0 - TURN_STEP

    def speed(self) -> Tuple[int, int]:
        """
        Per-axis speed for this heading.

        Truncates toward zero rather than rounding, which gives the
        coarse, nearly eight-way movement the collision tuning expects.
        """
        radians = math.radians(self.degree)
        return int(SPEED * math.cos(radians)), int(SPEED * math.sin(radians))

    def reset(self) -> None:
        self.degree = 0.0

    def __repr__(self):
        return f"<Heading degree={self.degree}, held={sorted(self.held)}>"

"""
Autopilot player - steers toward the apple, then toward the goal gap.
"""

import math
from typing import Set, Tuple

from domain.constants import APPLE_RAD, LEFT, RIGHT, TOP_LIMIT, TURN_STEP
from domain.game_state import GameState
from .base import Player


def angle_to(origin: Tuple[int, int], target: Tuple[int, int]) -> float:
    """Screen-space bearing from origin to target in [0, 360)."""
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    return math.degrees(math.atan2(dy, dx)) % 360.0


def turn_error(current: float, desired: float) -> float:
    """Signed smallest rotation from current to desired, in (-180, 180]."""
    error = (desired - current) % 360.0
    if error > 180.0:
        error -= 360.0
    return error


class ChasePlayer(Player):
    """
    Holds whichever key turns the heading toward its target.

    The target is the centre of the apple until the goal gap opens, and a
    point just above the gap after that. Nothing is held once the heading
    is within half a turn step of the target bearing.
    """

    name = "chase"

    def target(self, game_state: GameState) -> Tuple[int, int]:
        if game_state.allow_win:
            gap_mid = (game_state.arena["gap_left"] + game_state.arena["gap_right"]) // 2
            return gap_mid, TOP_LIMIT - APPLE_RAD
        apple_x, apple_y = game_state.apple
        return apple_x + APPLE_RAD // 2, apple_y + APPLE_RAD // 2

    def get_keys(self, game_state: GameState) -> Set[str]:
        desired = angle_to(game_state.head, self.target(game_state))
        error = turn_error(game_state.degree, desired)

        if abs(error) <= TURN_STEP / 2:
            return set()
        return {RIGHT} if error > 0 else {LEFT}

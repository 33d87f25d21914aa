"""
Arena geometry for each level, and apple placement inside it.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, Tuple

from .constants import (
    APPLE_RAD,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    BOTTOM_MARGIN,
    GAP_ADJUST,
    GAP_HALF_WIDTH,
    MAX_PLACEMENT_ATTEMPTS,
    RAND_POS,
    TOP_LIMIT,
)

logger = logging.getLogger(__name__)

FINAL_LEVEL = 3


@dataclass(frozen=True)
class Arena:
    """
    Walls, goal gap and apple margins for one level.

    Attributes:
        level: level index, 1-based
        width: nominal arena width
        left_limit: head x at or below this hits the left wall
        right_limit: head x at or above this hits the right wall
        wall_left, wall_right: x of the wall lines as drawn
        gap_center: horizontal midpoint of the goal gap in the top wall
        start_x: head x when the wyrm is laid out at level start
        apple_margin: minimum apple x; also shrinks the maximum apple x
    """
    level: int
    width: int
    left_limit: int
    right_limit: int
    wall_left: int
    wall_right: int
    gap_center: int
    start_x: int
    apple_margin: int

    def bottom_limit(self, allow_win: bool) -> int:
        """Head y at or beyond which the bottom wall is hit."""
        if allow_win:
            return BOARD_HEIGHT - BOTTOM_MARGIN + GAP_ADJUST
        return BOARD_HEIGHT - BOTTOM_MARGIN

    def hits_side_wall(self, x: int) -> bool:
        return x >= self.right_limit or x <= self.left_limit

    def gap_bounds(self) -> Tuple[int, int]:
        return self.gap_center - GAP_HALF_WIDTH, self.gap_center + GAP_HALF_WIDTH

    def in_gap(self, x: int) -> bool:
        low, high = self.gap_bounds()
        return low <= x <= high

    def apple_bounds(self) -> Tuple[int, int, int, int]:
        """Inclusive (min_x, max_x, min_y, max_y) for apple positions."""
        return (
            self.apple_margin,
            BOARD_WIDTH - (self.apple_margin + 2 * APPLE_RAD),
            TOP_LIMIT,
            BOARD_HEIGHT - (BOTTOM_MARGIN - GAP_ADJUST),
        )

    def geometry(self, allow_win: bool) -> Dict[str, int]:
        """Plain-dict geometry for renderers and replays."""
        gap_left, gap_right = self.gap_bounds()
        return {
            "level": self.level,
            "width": self.width,
            "height": BOARD_HEIGHT,
            "wall_left": self.wall_left,
            "wall_right": self.wall_right,
            "wall_top": TOP_LIMIT,
            "wall_bottom": BOARD_HEIGHT - (BOTTOM_MARGIN - GAP_ADJUST),
            "left_limit": self.left_limit,
            "right_limit": self.right_limit,
            "bottom_limit": self.bottom_limit(allow_win),
            "gap_left": gap_left,
            "gap_right": gap_right,
        }


LEVELS: Dict[int, Arena] = {
    1: Arena(level=1, width=500, left_limit=5, right_limit=489,
             wall_left=2, wall_right=496, gap_center=250,
             start_x=50, apple_margin=5),
    2: Arena(level=2, width=400, left_limit=55, right_limit=435,
             wall_left=52, wall_right=447, gap_center=242,
             start_x=100, apple_margin=55),
    3: Arena(level=3, width=300, left_limit=105, right_limit=385,
             wall_left=102, wall_right=397, gap_center=250,
             start_x=150, apple_margin=105),
}


def get_arena(level: int) -> Arena:
    """
    Look up the arena for a level.

    Raises:
        ValueError: If the level does not exist.
    """
    if level not in LEVELS:
        available = ", ".join(str(k) for k in sorted(LEVELS))
        raise ValueError(f"Unknown level {level}. Available levels: {available}")
    return LEVELS[level]


def _sample_axis(rng: random.Random, low: int, high: int, max_attempts: int, axis: str) -> int:
    for _ in range(max_attempts):
        candidate = rng.randrange(RAND_POS) * APPLE_RAD
        if low <= candidate <= high:
            return candidate

    # Smallest grid value inside [low, high]; the tables above always have one.
    fallback = -(-low // APPLE_RAD) * APPLE_RAD
    logger.warning(
        "Apple %s placement exhausted %s attempts; falling back to %s",
        axis, max_attempts, fallback,
    )
    return fallback


def place_apple(
    arena: Arena,
    rng: random.Random = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Tuple[int, int]:
    """
    Rejection-sample an apple position on the apple grid, one axis at a time.

    Each draw is a random grid index times APPLE_RAD. Draws outside the
    arena's apple bounds are discarded. When an axis runs out of attempts
    the smallest in-bounds grid value is used instead.
    """
    rng = rng or random.Random()
    min_x, max_x, min_y, max_y = arena.apple_bounds()

    apple_x = _sample_axis(rng, min_x, max_x, max_attempts, "x")
    apple_y = _sample_axis(rng, min_y, max_y, max_attempts, "y")

    logger.debug("Placed apple at (%s, %s) on level %s", apple_x, apple_y, arena.level)
    return apple_x, apple_y

"""
Round controller: per-tick apple, collision, movement and level logic.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from .arena import FINAL_LEVEL, Arena, get_arena, place_apple
from .constants import (
    ALIVE,
    APPLE_RAD,
    APPLE_TOLERANCE,
    DEAD,
    DOT_RAD,
    GROWTH,
    GROWTH_CEILING,
    NECK_SEGMENTS,
    NUM_DOTS,
    SCORE_PER_APPLE,
    SEGMENT_SPACING,
    START_DOTS,
    START_Y,
    TOP_LIMIT,
    WON,
)
from .game_state import GameState
from .heading import Heading
from .wyrm import Wyrm

logger = logging.getLogger(__name__)


class RoundController:
    """
    Owns the wyrm, heading, apple, score and level, and advances them one
    tick at a time.

    Per movement tick: check_apple -> check_collision -> move. Rotation
    ticks only touch the heading. Nothing here blocks or schedules; the
    caller drives both tick kinds and must not interleave them.
    """

    def __init__(self, rng: Optional[random.Random] = None, capacity: int = NUM_DOTS):
        self.rng = rng or random.Random()
        self.wyrm = Wyrm(capacity)
        self.heading = Heading()
        self.score = 0
        self.tick_count = 0
        self.level = 1
        self.arena: Arena = get_arena(1)
        self.allow_win = False
        self.state = ALIVE
        self.apple: Tuple[int, int] = (0, 0)
        self.new_game()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def new_game(self) -> None:
        """Start over from level one with a zero score."""
        self.score = 0
        self.tick_count = 0
        self.start_level(1)

    def start_level(self, level: int) -> None:
        """Reset the wyrm, heading and apple for ``level``. Score is kept."""
        self.arena = get_arena(level)
        self.level = level
        self.wyrm.reset(self.arena.start_x, START_Y, SEGMENT_SPACING, START_DOTS)
        self.heading.reset()
        self.allow_win = False
        self.state = ALIVE
        self.place_apple()
        logger.info("Level %s started (arena width %s)", level, self.arena.width)

    def next_level(self) -> None:
        if self.level >= FINAL_LEVEL:
            self.state = WON
            logger.info("Wyrm escaped the final level. Final score: %s", self.score)
            return
        logger.info("Wyrm escaped level %s with score %s", self.level, self.score)
        self.start_level(self.level + 1)

    @property
    def is_over(self) -> bool:
        return self.state != ALIVE

    # ------------------------------------------------------------------
    # Per-tick steps
    # ------------------------------------------------------------------

    def place_apple(self) -> Tuple[int, int]:
        self.apple = place_apple(self.arena, self.rng)
        return self.apple

    def check_apple(self) -> bool:
        """
        Eat the apple if the head box overlaps it and the wyrm may still grow.

        Returns True when an apple was eaten.
        """
        if self.wyrm.active_count >= GROWTH_CEILING:
            return False

        head_x, head_y = self.wyrm.head
        apple_x, apple_y = self.apple
        if not (apple_x - APPLE_TOLERANCE <= head_x <= apple_x + APPLE_RAD
                and apple_y <= head_y <= apple_y + APPLE_RAD):
            return False

        self.wyrm.grow(GROWTH)
        self.score += SCORE_PER_APPLE
        logger.debug("Apple eaten at %s; length %s, score %s",
                     self.apple, self.wyrm.active_count, self.score)
        self.place_apple()
        return True

    def _hits_body(self) -> bool:
        """Head overlaps any segment past the neck."""
        head_x, head_y = self.wyrm.head
        reach = DOT_RAD + APPLE_TOLERANCE
        for j in range(NECK_SEGMENTS + 1, self.wyrm.active_count):
            seg_x, seg_y = self.wyrm.segment_at(j)
            if seg_x <= head_x <= seg_x + reach and seg_y <= head_y <= seg_y + reach:
                return True
        return False

    def _hits_wall(self) -> bool:
        head_x, head_y = self.wyrm.head
        if head_y >= self.arena.bottom_limit(self.allow_win):
            return True
        if head_y <= TOP_LIMIT:
            return True
        return self.arena.hits_side_wall(head_x)

    def check_collision(self) -> str:
        """
        Run the self, wall, growth-gate and goal-gap checks once.

        Reaching the goal gap clears the level even if the head also
        touched the top wall on the same tick. Returns the resulting state.
        """
        if self.state != ALIVE:
            return self.state

        cause = None
        if self._hits_body():
            cause = "self"
        elif self._hits_wall():
            cause = "wall"

        if self.wyrm.active_count >= GROWTH_CEILING and not self.allow_win:
            self.allow_win = True
            logger.info("Goal gap opened on level %s", self.level)

        head_x, head_y = self.wyrm.head
        if self.allow_win and self.arena.in_gap(head_x) and head_y <= TOP_LIMIT:
            self.next_level()
            return self.state

        if cause is not None:
            self._die(cause)
        return self.state

    def _die(self, reason: str) -> None:
        if self.state != ALIVE:
            return
        self.state = DEAD
        self.wyrm.alive = False
        self.wyrm.death_reason = reason
        self.wyrm.death_tick = self.tick_count
        logger.info("Wyrm died (%s) on level %s at tick %s with score %s",
                    reason, self.level, self.tick_count, self.score)

    def move(self) -> None:
        dx, dy = self.heading.speed()
        self.wyrm.advance(dx, dy)

    def tick(self) -> str:
        """One movement tick. Does nothing once the round is over."""
        if self.state != ALIVE:
            return self.state

        self.tick_count += 1
        self.check_apple()
        self.check_collision()
        if self.state == ALIVE:
            self.move()
        return self.state

    def rotate_tick(self, held: Optional[Iterable[str]] = None) -> None:
        """One rotation tick, optionally with a fresh sample of held keys."""
        if self.state != ALIVE:
            return
        if held is not None:
            self.heading.set_held(held)
        self.heading.rotate()

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def get_current_state(self) -> GameState:
        return GameState(
            tick=self.tick_count,
            level=self.level,
            state=self.state,
            segments=self.wyrm.positions(),
            apple=self.apple,
            score=self.score,
            degree=self.heading.degree,
            allow_win=self.allow_win,
            arena=self.arena.geometry(self.allow_win),
            death_reason=self.wyrm.death_reason,
        )

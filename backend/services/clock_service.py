"""
Tick scheduling for a game session.

Two fixed-interval jobs drive a round:
 - the movement tick (apple, collision and movement), every DELAY ms
 - the rotation tick (heading update from held keys), every ROTATE_DELAY ms

GameClock runs them in real time on a `schedule.Scheduler`; LockstepClock
runs the same callbacks back to back for headless simulation and tests.
Both serialize the callbacks on one lock and stop both jobs once the
round is over.
"""

import logging
import threading
import time
from typing import Callable, Optional

import schedule

from domain.constants import DELAY, ROTATE_DELAY, ROTATE_RATIO

logger = logging.getLogger(__name__)

IDLE_SLEEP_SECONDS = 0.005
JOB_TAG = "wyrm"


class GameClock:
    """Real-time driver for the movement and rotation ticks."""

    def __init__(
        self,
        on_move: Callable[[], object],
        on_rotate: Callable[[], object],
        is_over: Callable[[], bool],
        tick_ms: int = DELAY,
        rotate_ms: int = ROTATE_DELAY,
        scheduler: Optional[schedule.Scheduler] = None,
    ):
        if tick_ms <= 0 or rotate_ms <= 0:
            raise ValueError(
                f"Tick periods must be positive (tick_ms={tick_ms}, rotate_ms={rotate_ms})"
            )
        self.on_move = on_move
        self.on_rotate = on_rotate
        self.is_over = is_over
        self.tick_ms = tick_ms
        self.rotate_ms = rotate_ms
        self.scheduler = scheduler or schedule.Scheduler()
        self.lock = threading.Lock()
        self.move_job: Optional[schedule.Job] = None
        self.rotate_job: Optional[schedule.Job] = None

    def _guarded(self, callback: Callable[[], object], name: str) -> Callable[[], object]:
        def job():
            with self.lock:
                if self.is_over():
                    logger.debug("Round over; cancelling %s job", name)
                    return schedule.CancelJob
                callback()
                if self.is_over():
                    logger.debug("Round over; cancelling %s job", name)
                    return schedule.CancelJob
            return None
        return job

    def start(self) -> None:
        """Register both jobs. Calling start twice is a no-op."""
        if self.move_job is not None:
            return
        self.move_job = (
            self.scheduler.every(self.tick_ms / 1000.0).seconds
            .do(self._guarded(self.on_move, "movement"))
            .tag(JOB_TAG, "movement")
        )
        self.rotate_job = (
            self.scheduler.every(self.rotate_ms / 1000.0).seconds
            .do(self._guarded(self.on_rotate, "rotation"))
            .tag(JOB_TAG, "rotation")
        )
        logger.info(
            "Clock started: movement every %s ms, rotation every %s ms",
            self.tick_ms, self.rotate_ms,
        )

    @property
    def running(self) -> bool:
        return bool(self.scheduler.get_jobs(JOB_TAG))

    def run(self) -> None:
        """Block until both jobs have cancelled themselves or stop() is called."""
        self.start()
        while self.running:
            self.scheduler.run_pending()
            time.sleep(IDLE_SLEEP_SECONDS)
        logger.info("Clock stopped")

    def stop(self) -> None:
        self.scheduler.clear(JOB_TAG)


class LockstepClock:
    """
    Deterministic driver with the same callbacks as GameClock.

    Each step runs ``ratio`` rotation ticks followed by one movement tick,
    matching the real-time 5:1 cadence without sleeping.
    """

    def __init__(
        self,
        on_move: Callable[[], object],
        on_rotate: Callable[[], object],
        is_over: Callable[[], bool],
        ratio: int = ROTATE_RATIO,
        max_ticks: Optional[int] = None,
    ):
        if ratio < 1:
            raise ValueError(f"Rotation ratio must be at least 1, got {ratio}")
        self.on_move = on_move
        self.on_rotate = on_rotate
        self.is_over = is_over
        self.ratio = ratio
        self.max_ticks = max_ticks
        self.lock = threading.Lock()
        self.ticks = 0
        self._stopped = False

    def step(self) -> None:
        with self.lock:
            for _ in range(self.ratio):
                if self.is_over():
                    return
                self.on_rotate()
            if self.is_over():
                return
            self.on_move()
            self.ticks += 1

    def run(self) -> int:
        """Step until the round ends, stop() is called or max_ticks is hit."""
        self._stopped = False
        while not self._stopped and not self.is_over():
            if self.max_ticks is not None and self.ticks >= self.max_ticks:
                logger.info("Stopping after max_ticks=%s", self.max_ticks)
                break
            self.step()
        return self.ticks

    def stop(self) -> None:
        self._stopped = True

"""
Wyrm entity for the game engine.
"""

import logging
from typing import List, Optional, Tuple

from .constants import NUM_DOTS, START_DOTS

logger = logging.getLogger(__name__)


class Wyrm:
    """
    The player-controlled chain of body segments.

    Segments live in a fixed-capacity buffer; only the first
    ``active_count`` entries are part of the body. Index 0 is the head.

    Attributes:
        capacity: number of buffered segment slots
        active_count: segments currently in play
        alive: whether the wyrm is still alive
        death_reason: 'wall' or 'self' once dead
        death_tick: the tick on which the wyrm died
    """

    def __init__(self, capacity: int = NUM_DOTS):
        if capacity < 1:
            raise ValueError(f"Wyrm capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._segments: List[Tuple[int, int]] = [(0, 0)] * capacity
        self.active_count = 0
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    def reset(self, start_x: int, start_y: int, spacing: int, count: int = START_DOTS) -> None:
        """Lay out ``count`` segments in a horizontal line, head first, trailing left."""
        if not 1 <= count <= self.capacity:
            raise ValueError(f"Segment count {count} outside 1..{self.capacity}")

        for j in range(count):
            self._segments[j] = (start_x - j * spacing, start_y)
        self.active_count = count
        self.alive = True
        self.death_reason = None
        self.death_tick = None

    def advance(self, head_dx: int, head_dy: int) -> None:
        """
        Move one step: every segment takes its predecessor's position,
        then the head moves by (head_dx, head_dy).
        """
        head_x, head_y = self._segments[0]
        # Walk tail -> head so nothing is overwritten before it is copied.
        for j in range(self.active_count - 1, 0, -1):
            self._segments[j] = self._segments[j - 1]
        self._segments[0] = (head_x + head_dx, head_y + head_dy)

    def grow(self, increment: int) -> int:
        """
        Activate ``increment`` more segments, each stacked on the old tail.

        Growth past capacity is clamped. Returns the number of segments
        actually added.
        """
        if increment < 0:
            raise ValueError(f"Growth increment must not be negative, got {increment}")

        added = min(increment, self.capacity - self.active_count)
        if added < increment:
            logger.warning(
                "Growth of %s clamped to %s (active=%s, capacity=%s)",
                increment, added, self.active_count, self.capacity,
            )
        if added <= 0:
            return 0

        tail = self._segments[self.active_count - 1]
        for j in range(self.active_count, self.active_count + added):
            self._segments[j] = tail
        self.active_count += added
        return added

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first segment)."""
        return self._segments[0]

    def segment_at(self, index: int) -> Tuple[int, int]:
        if not 0 <= index < self.active_count:
            raise IndexError(
                f"Segment {index} outside active range 0..{self.active_count - 1}"
            )
        return self._segments[index]

    def positions(self) -> List[Tuple[int, int]]:
        """Copy of the active segments, head first."""
        return self._segments[:self.active_count]

    def __len__(self) -> int:
        return self.active_count

    def __repr__(self):
        return f"<Wyrm head={self.head}, active={self.active_count}/{self.capacity}, alive={self.alive}>"

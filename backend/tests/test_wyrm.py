"""
Tests for domain.wyrm - the body chain.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.wyrm import Wyrm
from domain.constants import NUM_DOTS, START_DOTS


class TestWyrmReset:
    """Tests for laying out the chain."""

    def test_reset_lays_out_horizontal_line_head_first(self):
        """Segments trail to the left of the head with constant spacing."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10, 3)

        assert wyrm.positions() == [(50, 50), (40, 50), (30, 50)]
        assert wyrm.head == (50, 50)
        assert wyrm.active_count == START_DOTS

    def test_reset_revives_a_dead_wyrm(self):
        """Reset clears death bookkeeping."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        wyrm.alive = False
        wyrm.death_reason = "wall"
        wyrm.death_tick = 12

        wyrm.reset(100, 50, 10)

        assert wyrm.alive is True
        assert wyrm.death_reason is None
        assert wyrm.death_tick is None

    def test_reset_rejects_count_beyond_capacity(self):
        """A layout longer than the buffer is refused."""
        wyrm = Wyrm(capacity=5)
        with pytest.raises(ValueError):
            wyrm.reset(50, 50, 10, 6)

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            Wyrm(capacity=0)


class TestWyrmAdvance:
    """Tests for follow-the-leader movement."""

    def test_each_segment_takes_predecessor_position(self):
        """After advance, segment j holds what segment j-1 held before."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10, 6)
        before = wyrm.positions()

        wyrm.advance(7, -3)
        after = wyrm.positions()

        for j in range(1, len(before)):
            assert after[j] == before[j - 1]
        assert after[0] == (before[0][0] + 7, before[0][1] - 3)

    def test_advance_keeps_active_count(self):
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        wyrm.advance(10, 0)
        assert wyrm.active_count == 3

    def test_advance_over_many_ticks(self):
        """Repeated moves keep the chain a shifted copy of the head trail."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10, 4)
        trail = [wyrm.head]
        for dx, dy in [(10, 0), (9, 4), (0, 10), (-7, 7), (-10, 0)]:
            wyrm.advance(dx, dy)
            trail.insert(0, wyrm.head)

        assert wyrm.positions() == trail[:4]


class TestWyrmGrow:
    """Tests for growth and the capacity guard."""

    def test_grow_stacks_new_segments_on_old_tail(self):
        """New slots copy the old tail position."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)

        added = wyrm.grow(3)

        assert added == 3
        assert wyrm.active_count == 6
        assert wyrm.positions()[3:] == [(30, 50)] * 3

    def test_grow_then_advance_unfolds_tail(self):
        """Stacked tail segments peel off one per tick."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        wyrm.grow(3)
        wyrm.advance(10, 0)

        assert wyrm.positions() == [(60, 50), (50, 50), (40, 50), (30, 50), (30, 50), (30, 50)]

    def test_growth_after_n_apples(self):
        """active_count is start + 3N while under capacity."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        for n in range(1, 6):
            wyrm.grow(3)
            assert wyrm.active_count == START_DOTS + 3 * n

    def test_grow_clamps_at_capacity(self):
        """Growth that would overflow the buffer is clamped, not raised."""
        wyrm = Wyrm(capacity=8)
        wyrm.reset(50, 50, 10)
        wyrm.grow(3)

        added = wyrm.grow(3)

        assert added == 2
        assert wyrm.active_count == 8

        assert wyrm.grow(3) == 0
        assert wyrm.active_count == 8

    def test_grow_never_exceeds_default_capacity(self):
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        for _ in range(40):
            wyrm.grow(3)
        assert wyrm.active_count == NUM_DOTS

    def test_grow_rejects_negative_increment(self):
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        with pytest.raises(ValueError):
            wyrm.grow(-1)


class TestWyrmAccessors:
    """Tests for read-only accessors."""

    def test_segment_at_reads_active_segments(self):
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        assert wyrm.segment_at(0) == (50, 50)
        assert wyrm.segment_at(2) == (30, 50)

    def test_segment_at_refuses_buffer_slots(self):
        """Slots past active_count are never readable."""
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        with pytest.raises(IndexError):
            wyrm.segment_at(3)
        with pytest.raises(IndexError):
            wyrm.segment_at(-1)

    def test_positions_is_a_copy(self):
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        positions = wyrm.positions()
        positions[0] = (0, 0)
        assert wyrm.head == (50, 50)

    def test_len_and_repr(self):
        wyrm = Wyrm()
        wyrm.reset(50, 50, 10)
        assert len(wyrm) == 3
        assert "active=3/50" in repr(wyrm)

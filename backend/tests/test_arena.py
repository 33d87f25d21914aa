"""
Tests for domain.arena - level geometry and apple placement.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.arena import FINAL_LEVEL, LEVELS, get_arena, place_apple
from domain.constants import APPLE_RAD


class TestArenaGeometry:
    """Tests for per-level walls and the goal gap."""

    def test_three_levels_narrowing(self):
        """Each level's playable band is narrower than the last."""
        spans = [LEVELS[n].right_limit - LEVELS[n].left_limit for n in (1, 2, 3)]
        assert spans[0] > spans[1] > spans[2]
        assert FINAL_LEVEL == 3

    def test_level_one_side_walls(self):
        arena = get_arena(1)
        assert arena.hits_side_wall(5)
        assert arena.hits_side_wall(0)
        assert arena.hits_side_wall(489)
        assert not arena.hits_side_wall(6)
        assert not arena.hits_side_wall(488)

    def test_level_two_and_three_offsets(self):
        assert get_arena(2).hits_side_wall(55)
        assert not get_arena(2).hits_side_wall(56)
        assert get_arena(2).hits_side_wall(435)
        assert get_arena(3).hits_side_wall(105)
        assert get_arena(3).hits_side_wall(385)
        assert not get_arena(3).hits_side_wall(384)

    def test_bottom_limit_moves_when_gap_opens(self):
        arena = get_arena(1)
        assert arena.bottom_limit(False) == 465
        assert arena.bottom_limit(True) == 475

    @pytest.mark.parametrize("level,low,high", [
        (1, 230, 270),
        (2, 222, 262),
        (3, 230, 270),
    ])
    def test_gap_window_is_forty_wide(self, level, low, high):
        arena = get_arena(level)
        assert arena.gap_bounds() == (low, high)
        assert arena.in_gap(low)
        assert arena.in_gap(high)
        assert not arena.in_gap(low - 1)
        assert not arena.in_gap(high + 1)

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError, match="Unknown level 4"):
            get_arena(4)

    def test_geometry_dict_has_renderer_fields(self):
        geometry = get_arena(2).geometry(allow_win=True)
        assert geometry["width"] == 400
        assert geometry["gap_left"] == 222
        assert geometry["gap_right"] == 262
        assert geometry["bottom_limit"] == 475
        assert geometry["wall_left"] == 52
        assert geometry["wall_right"] == 447


class TestPlaceApple:
    """Tests for rejection-sampled apple placement."""

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_placements_stay_inside_bounds(self, level):
        """Every sampled apple lands on the grid within the level's margins."""
        arena = get_arena(level)
        min_x, max_x, min_y, max_y = arena.apple_bounds()
        rng = random.Random(level)

        for _ in range(500):
            x, y = place_apple(arena, rng)
            assert min_x <= x <= max_x
            assert min_y <= y <= max_y
            assert x % APPLE_RAD == 0
            assert y % APPLE_RAD == 0

    def test_apple_bounds_per_level(self):
        assert get_arena(1).apple_bounds() == (5, 465, 20, 475)
        assert get_arena(2).apple_bounds() == (55, 415, 20, 475)
        assert get_arena(3).apple_bounds() == (105, 365, 20, 475)

    def test_same_seed_same_apple(self):
        arena = get_arena(1)
        assert place_apple(arena, random.Random(7)) == place_apple(arena, random.Random(7))

    def test_exhausted_attempts_fall_back_in_bounds(self):
        """A sampler that only ever misses still yields an in-bounds apple."""
        arena = get_arena(3)

        class AlwaysZero(random.Random):
            def randrange(self, *args, **kwargs):
                return 0

        x, y = place_apple(arena, AlwaysZero(), max_attempts=10)

        assert (x, y) == (105, 30)

    def test_fallback_is_logged(self, caplog):
        arena = get_arena(1)

        class AlwaysZero(random.Random):
            def randrange(self, *args, **kwargs):
                return 0

        with caplog.at_level("WARNING"):
            place_apple(arena, AlwaysZero(), max_attempts=3)

        assert "exhausted 3 attempts" in caplog.text

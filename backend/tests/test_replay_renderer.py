"""
Tests for the replay renderer.
"""

import os
import sys

import pytest
from PIL import Image

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.arena import get_arena
from domain.game_state import GameState
from services.replay_renderer import ColorScheme, WyrmFrameRenderer


def make_frame(**overrides):
    params = dict(
        tick=1,
        level=1,
        state="alive",
        segments=[(100, 100), (90, 100), (80, 100)],
        apple=(300, 300),
        score=15,
        degree=0.0,
        allow_win=False,
        arena=get_arena(1).geometry(False),
    )
    params.update(overrides)
    return GameState(**params).to_dict()


class TestRenderFrame:
    """Tests for single-frame rendering."""

    def test_frame_size_matches_board(self):
        renderer = WyrmFrameRenderer()
        img = renderer.render_frame(make_frame())
        assert img.size == (500, 500)
        assert renderer.frame_size() == (500, 500)

    def test_scale_multiplies_size(self):
        img = WyrmFrameRenderer(scale=2).render_frame(make_frame())
        assert img.size == (1000, 1000)

    def test_head_body_and_apple_colors(self):
        img = WyrmFrameRenderer().render_frame(make_frame())

        assert img.getpixel((102, 102)) == ColorScheme.HEAD
        assert img.getpixel((92, 102)) == ColorScheme.BODY
        assert img.getpixel((307, 307)) == ColorScheme.APPLE
        assert img.getpixel((250, 250)) == ColorScheme.BACKGROUND

    def test_apple_hidden_and_gap_open_once_win_allowed(self):
        frame = make_frame(allow_win=True, arena=get_arena(1).geometry(True))
        img = WyrmFrameRenderer().render_frame(frame)

        assert img.getpixel((307, 307)) == ColorScheme.BACKGROUND
        assert img.getpixel((250, 20)) == ColorScheme.BACKGROUND
        assert img.getpixel((100, 20)) == ColorScheme.WALL

    def test_closed_top_wall(self):
        img = WyrmFrameRenderer().render_frame(make_frame())
        assert img.getpixel((250, 20)) == ColorScheme.WALL

    def test_end_screens_skip_the_board(self):
        renderer = WyrmFrameRenderer()
        for state in ("dead", "won"):
            img = renderer.render_frame(make_frame(state=state))
            assert img.getpixel((102, 102)) == ColorScheme.BACKGROUND

    def test_scale_must_be_positive(self):
        with pytest.raises(ValueError):
            WyrmFrameRenderer(scale=0)


class TestRenderReplay:
    """Tests for whole-replay output."""

    def test_render_replay_writes_png_per_frame(self, tmp_path):
        replay = {"metadata": {}, "frames": [make_frame(tick=t) for t in range(3)]}

        paths = WyrmFrameRenderer().render_replay(replay, str(tmp_path / "frames"))

        assert [p.name for p in paths] == ["frame_00000.png", "frame_00001.png", "frame_00002.png"]
        assert all(p.exists() for p in paths)

    def test_save_gif(self, tmp_path):
        replay = {"metadata": {}, "frames": [make_frame(tick=t) for t in range(4)]}

        path = WyrmFrameRenderer().save_gif(replay, str(tmp_path / "out" / "game.gif"))

        with Image.open(path) as gif:
            assert gif.n_frames >= 1
            assert gif.size == (500, 500)

    def test_empty_replay_raises(self, tmp_path):
        with pytest.raises(ValueError, match="no frames"):
            WyrmFrameRenderer().render_replay({"frames": []}, str(tmp_path))

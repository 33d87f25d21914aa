"""
Replay Rendering Service for Uncle Wyrm

Renders GameState snapshots (as produced by GameState.to_dict()) to
images using PIL (Pillow):
1. One PNG per frame into an output directory
2. Or a single animated GIF of the whole replay

The picture mirrors the desktop game window: gray background, black
walls with a gap in the top wall once it opens, red apple, green head
and orange body dots, and the score in the top-left corner.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import APPLE_RAD, BOARD_HEIGHT, BOARD_WIDTH, DEAD, DELAY, DOT_RAD, WON

logger = logging.getLogger(__name__)


class ColorScheme:
    """Colors of the desktop game window"""

    BACKGROUND = (128, 128, 128)
    WALL = (0, 0, 0)
    APPLE = (255, 0, 0)
    HEAD = (0, 255, 0)
    BODY = (255, 200, 0)
    TEXT = (0, 0, 0)


class WyrmFrameRenderer:
    """Render Uncle Wyrm replays frame by frame"""

    def __init__(self, scale: int = 1, frame_ms: int = DELAY):
        if scale < 1:
            raise ValueError(f"Scale must be at least 1, got {scale}")
        self.scale = scale
        self.frame_ms = frame_ms
        self.width = BOARD_WIDTH * scale
        self.height = BOARD_HEIGHT * scale
        self.font = ImageFont.load_default()

    def _px(self, value: int) -> int:
        return value * self.scale

    def render_frame(self, frame: Dict[str, Any]) -> Image.Image:
        """Render a single snapshot"""
        img = Image.new('RGB', (self.width, self.height), ColorScheme.BACKGROUND)
        draw = ImageDraw.Draw(img)

        state = frame.get("state")
        if state == WON:
            self._draw_message(draw, ["You Win!"])
            return img
        if state == DEAD:
            self._draw_message(draw, ["You Died", f"Score: {frame.get('score', 0)}"])
            return img

        self._draw_walls(draw, frame["arena"], frame.get("allow_win", False))

        if not frame.get("allow_win", False):
            apple_x, apple_y = frame["apple"]
            draw.ellipse(
                [self._px(apple_x), self._px(apple_y),
                 self._px(apple_x + APPLE_RAD), self._px(apple_y + APPLE_RAD)],
                fill=ColorScheme.APPLE,
            )

        for idx, (x, y) in enumerate(frame["segments"]):
            color = ColorScheme.HEAD if idx == 0 else ColorScheme.BODY
            draw.ellipse(
                [self._px(x), self._px(y), self._px(x + DOT_RAD), self._px(y + DOT_RAD)],
                fill=color,
            )

        draw.text((self._px(5), self._px(3)), f"Score: {frame.get('score', 0)}",
                  fill=ColorScheme.TEXT, font=self.font)
        return img

    def _draw_walls(self, draw: ImageDraw.ImageDraw, arena: Dict[str, int], allow_win: bool):
        left = self._px(arena["wall_left"])
        right = self._px(arena["wall_right"])
        top = self._px(arena["wall_top"])
        bottom = self._px(arena["wall_bottom"])

        if allow_win:
            # Top border with hole
            draw.line([left, top, self._px(arena["gap_left"]), top], fill=ColorScheme.WALL)
            draw.line([self._px(arena["gap_right"]), top, right, top], fill=ColorScheme.WALL)
        else:
            draw.line([left, top, right, top], fill=ColorScheme.WALL)

        draw.line([left, top, left, bottom], fill=ColorScheme.WALL)
        draw.line([right, top, right, bottom], fill=ColorScheme.WALL)
        draw.line([left, bottom, right, bottom], fill=ColorScheme.WALL)

    def _draw_message(self, draw: ImageDraw.ImageDraw, lines: List[str]):
        """Draw centered text lines"""
        y = self.height // 2 - 15 * self.scale
        for line in lines:
            bbox = draw.textbbox((0, 0), line, font=self.font)
            text_width = bbox[2] - bbox[0]
            draw.text((self.width // 2 - text_width // 2, y), line,
                      fill=ColorScheme.TEXT, font=self.font)
            y += 15 * self.scale

    def _frames(self, replay: Dict[str, Any]) -> List[Dict[str, Any]]:
        frames = replay.get("frames", [])
        if not frames:
            raise ValueError("Replay has no frames to render")
        return frames

    def render_replay(self, replay: Dict[str, Any], output_dir: str) -> List[Path]:
        """
        Write one PNG per frame.

        Returns:
            Paths of the written frames, in order.
        """
        frames = self._frames(replay)
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)

        paths: List[Path] = []
        for idx, frame in enumerate(frames):
            path = out / f"frame_{idx:05d}.png"
            self.render_frame(frame).save(path)
            paths.append(path)

        logger.info("Rendered %s frames to %s", len(paths), out)
        return paths

    def save_gif(self, replay: Dict[str, Any], output_path: str) -> Path:
        """Write the whole replay as an animated GIF."""
        frames = self._frames(replay)
        images = [self.render_frame(frame) for frame in frames]

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        images[0].save(
            path,
            save_all=True,
            append_images=images[1:],
            duration=self.frame_ms,
            loop=0,
        )
        logger.info("Saved %s-frame GIF to %s", len(images), path)
        return path

    def frame_size(self) -> Tuple[int, int]:
        return self.width, self.height

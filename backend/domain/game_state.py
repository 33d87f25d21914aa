"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple

from .constants import ALIVE, BOARD_HEIGHT, BOARD_WIDTH

CELL = 10  # board units per text cell in print_board


class GameState:
    """
    A read-only snapshot of one round, taken after a movement tick.

    Attributes:
        tick: movement ticks elapsed in the current game
        level: current level index (1-based)
        state: 'alive', 'dead' or 'won'
        segments: active body positions, head first
        apple: (x, y) of the current apple
        score: points collected so far
        degree: heading in degrees
        allow_win: whether the goal gap in the top wall is open
        arena: wall and gap geometry for the current level
        death_reason: 'wall' or 'self' once dead
    """

    def __init__(
        self,
        tick: int,
        level: int,
        state: str,
        segments: List[Tuple[int, int]],
        apple: Tuple[int, int],
        score: int,
        degree: float,
        allow_win: bool,
        arena: Dict[str, int],
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.level = level
        self.state = state
        self.segments = segments
        self.apple = apple
        self.score = score
        self.degree = degree
        self.allow_win = allow_win
        self.arena = arena
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.segments[0]

    @property
    def active_count(self) -> int:
        return len(self.segments)

    def print_board(self) -> str:
        """
        Returns a coarse text picture of the arena, one character per
        10x10 block:
        # = wall
        A = apple (hidden once the gap is open)
        H = wyrm head
        o = wyrm body
        """
        cols = BOARD_WIDTH // CELL
        rows = BOARD_HEIGHT // CELL
        board = [[' ' for _ in range(cols)] for _ in range(rows)]

        left = self.arena["wall_left"] // CELL
        right = min(self.arena["wall_right"] // CELL, cols - 1)
        top = self.arena["wall_top"] // CELL
        bottom = min(self.arena["wall_bottom"] // CELL, rows - 1)
        gap_left = self.arena["gap_left"] // CELL
        gap_right = self.arena["gap_right"] // CELL

        for col in range(left, right + 1):
            if not (self.allow_win and gap_left <= col <= gap_right):
                board[top][col] = '#'
            board[bottom][col] = '#'
        for row in range(top, bottom + 1):
            board[row][left] = '#'
            board[row][right] = '#'

        def plot(x: int, y: int, mark: str) -> None:
            col, row = x // CELL, y // CELL
            if 0 <= col < cols and 0 <= row < rows:
                board[row][col] = mark

        if not self.allow_win:
            plot(self.apple[0], self.apple[1], 'A')

        # Body first so the head is drawn on top
        for x, y in reversed(self.segments[1:]):
            plot(x, y, 'o')
        if self.segments:
            plot(self.head[0], self.head[1], 'H')

        header = f"Level {self.level} | Score: {self.score} | {self.state}"
        return "\n".join([header] + ["".join(row).rstrip() for row in board])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick": self.tick,
            "level": self.level,
            "state": self.state,
            "segments": [list(pos) for pos in self.segments],
            "apple": list(self.apple),
            "score": self.score,
            "degree": self.degree,
            "allow_win": self.allow_win,
            "arena": dict(self.arena),
            "death_reason": self.death_reason,
        }

    @property
    def is_alive(self) -> bool:
        return self.state == ALIVE

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, level={self.level}, state={self.state}, "
            f"score={self.score}, segments={len(self.segments)}>"
        )

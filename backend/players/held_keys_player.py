"""
Keyboard-style player - reports whatever keys are held down.
"""

from typing import Set

from domain.constants import VALID_KEYS
from domain.game_state import GameState
from .base import Player


class HeldKeysPlayer(Player):
    """
    Input adapter for a key-press/key-release event source.

    The event source calls press() and release() as keys change; the game
    reads the held set on each rotation tick. Keys other than LEFT and
    RIGHT are ignored.
    """

    name = "keyboard"

    def __init__(self):
        self._held: Set[str] = set()

    def press(self, key: str) -> None:
        if key in VALID_KEYS:
            self._held.add(key)

    def release(self, key: str) -> None:
        self._held.discard(key)

    def get_keys(self, game_state: GameState) -> Set[str]:
        return set(self._held)

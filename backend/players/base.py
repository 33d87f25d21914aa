"""
Base player interface for the game engine.
"""

from typing import Set

from domain.game_state import GameState


class Player:
    """
    Base class/interface for steering input.

    A player reports which steering keys are held right now. The game
    samples it once per rotation tick.
    """

    name = "player"

    def get_keys(self, game_state: GameState) -> Set[str]:
        """
        Return the currently held steering keys.

        Args:
            game_state: Current state of the game

        Returns:
            A subset of {"LEFT", "RIGHT"}; empty when nothing is held.
        """
        raise NotImplementedError

"""
Domain entities for the Uncle Wyrm game engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, rendering, input devices, etc.).
"""

from .constants import LEFT, RIGHT, VALID_KEYS, ALIVE, DEAD, WON
from .arena import Arena, LEVELS, FINAL_LEVEL, get_arena, place_apple
from .wyrm import Wyrm
from .heading import Heading
from .game_state import GameState
from .round_controller import RoundController

__all__ = [
    'LEFT', 'RIGHT', 'VALID_KEYS', 'ALIVE', 'DEAD', 'WON',
    'Arena', 'LEVELS', 'FINAL_LEVEL', 'get_arena', 'place_apple',
    'Wyrm',
    'Heading',
    'GameState',
    'RoundController',
]

"""
Player implementations for Uncle Wyrm.

This module contains the steering input sources that decide which
direction keys are held on each rotation tick.
"""

from .base import Player
from .held_keys_player import HeldKeysPlayer
from .random_player import RandomPlayer
from .chase_player import ChasePlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS, HEADLESS_VARIANTS

__all__ = [
    'Player',
    'HeldKeysPlayer',
    'RandomPlayer',
    'ChasePlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
    'HEADLESS_VARIANTS',
]

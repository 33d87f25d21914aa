"""
Registry for steering player variants.

Maps variant keys (e.g., 'chase', 'random') to player classes. To add a
new variant, create a module with a Player subclass, import it lazily
here, and add an entry to PLAYER_VARIANT_LOADERS.
"""

from typing import Callable, Dict, Optional, Type
from .base import Player


# Lazy imports to avoid circular dependencies
def _get_chase_player() -> Type[Player]:
    from .chase_player import ChasePlayer
    return ChasePlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_held_keys_player() -> Type[Player]:
    from .held_keys_player import HeldKeysPlayer
    return HeldKeysPlayer


# Registry: maps variant key -> callable that returns the player class
PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "chase": _get_chase_player,
    "random": _get_random_player,
    "keyboard": _get_held_keys_player,
}

DEFAULT_VARIANT = "chase"

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())

# Variants that steer themselves; "keyboard" needs an external key event source
HEADLESS_VARIANTS = [key for key in AVAILABLE_VARIANTS if key != "keyboard"]


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'chase', 'random', 'keyboard'. If None or
            empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> list:
    """
    Return metadata about all available player variants.

    Returns:
        List of dicts with 'key' and 'description' for each variant.
    """
    return [
        {"key": "chase", "description": "Autopilot: turns toward the apple, then toward the goal gap"},
        {"key": "random", "description": "Holds a random steering key for a few samples at a time"},
        {"key": "keyboard", "description": "Reports keys pressed and released by an event source"},
    ]

"""
Runtime settings loaded from the environment (and a local .env file).

Gameplay rules live in domain.constants; only knobs that change how a
session is driven or where its output goes are read here.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


def _positive_int(name: str, default: str) -> int:
    value = int(os.getenv(name, default))
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


# Tick periods in milliseconds
TICK_MS = _positive_int('WYRM_TICK_MS', '100')
ROTATE_MS = _positive_int('WYRM_ROTATE_MS', '20')

# Headless runs stop after this many movement ticks
MAX_TICKS = int(os.getenv('WYRM_MAX_TICKS', '3000'))

# Seed for apple placement and random steering; unset means nondeterministic
SEED = _optional_int('WYRM_SEED')

REPLAY_DIR = os.getenv('WYRM_REPLAY_DIR', 'completed_games')
LOG_LEVEL = os.getenv('WYRM_LOG_LEVEL', 'INFO')

import argparse
import json
import logging
import os
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import config
from domain.game_state import GameState
from domain.round_controller import RoundController
from players import HEADLESS_VARIANTS, Player, get_player_class
from players.random_player import RandomPlayer
from services.clock_service import GameClock, LockstepClock

logger = logging.getLogger(__name__)


class WyrmGame:
    """
    Manages one play session:
      - Round controller (wyrm, heading, apple, score, level)
      - Player (steering input)
      - Movement and rotation ticks
      - History for replay
    """
    def __init__(
        self,
        player: Player,
        rng: Optional[random.Random] = None,
        game_id: str = None,
        record_history: bool = True
    ):
        self.player = player
        self.controller = RoundController(rng=rng)
        self.start_time = time.time()
        self.record = record_history
        self.history: List[GameState] = []

        if game_id is None:
            self.game_id = str(uuid.uuid4())
        else:
            self.game_id = game_id
        logger.info("Game ID: %s", self.game_id)

        self.record_history()

    @property
    def game_over(self) -> bool:
        return self.controller.is_over

    def get_current_state(self) -> GameState:
        return self.controller.get_current_state()

    def rotate_tick(self):
        """Sample the player's held keys and turn the heading."""
        if self.game_over:
            return
        keys = self.player.get_keys(self.get_current_state())
        self.controller.rotate_tick(keys)

    def movement_tick(self):
        """Advance the round one tick and record the result."""
        if self.game_over:
            return
        self.controller.tick()
        self.record_history()
        if self.game_over:
            self.end_game()

    def record_history(self):
        if self.record:
            self.history.append(self.get_current_state())

    def end_game(self):
        state = self.get_current_state()
        if state.death_reason:
            logger.info("Game Over: wyrm hit %s on level %s after %s ticks. Score: %s",
                        "its own body" if state.death_reason == "self" else "a wall",
                        state.level, state.tick, state.score)
        else:
            logger.info("Game Over: %s on level %s after %s ticks. Score: %s",
                        state.state, state.level, state.tick, state.score)

    def serialize_history(self, history: List[GameState]) -> List[Dict[str, Any]]:
        """
        Convert the list of GameState objects to a JSON-serializable list of dicts.
        """
        return [state.to_dict() for state in history]

    def replay(self) -> Dict[str, Any]:
        state = self.get_current_state()
        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "player": getattr(self.player, "name", self.player.__class__.__name__),
            "final_state": state.state,
            "final_level": state.level,
            "final_score": state.score,
            "death_reason": state.death_reason,
            "ticks": state.tick,
        }
        return {
            "metadata": metadata,
            "frames": self.serialize_history(self.history),
        }

    def save_history_to_json(self, filename=None, directory=None) -> str:
        if filename is None:
            filename = f"wyrm_game_{self.game_id}.json"
        directory = directory or config.REPLAY_DIR

        path = os.path.join(directory, filename)
        try:
            os.makedirs(directory, exist_ok=True)
            with open(path, "w") as f:
                json.dump(self.replay(), f, indent=2)
        except OSError:
            logger.exception("Failed to write replay to %s", path)
            raise

        logger.info("Saved replay to %s", path)
        return path


# -------------------------------
# Simulation Function
# -------------------------------

def build_player(player_key: str, rng: random.Random) -> Player:
    player_cls = get_player_class(player_key)
    if issubclass(player_cls, RandomPlayer):
        return player_cls(rng=rng)
    return player_cls()


def run_simulation(player_key: str, game_params: argparse.Namespace) -> Dict:
    """
    Runs a single Uncle Wyrm game.

    Args:
        player_key: Steering variant key (see players.variant_registry).
        game_params: An object (like argparse.Namespace) containing session
                     settings (max_ticks, seed, realtime, no_save, frames, gif).

    Returns:
        A dictionary summarizing the game results.
    """
    seed = getattr(game_params, 'seed', None)
    rng = random.Random(seed)
    player = build_player(player_key, rng)

    game = WyrmGame(player=player, rng=rng, game_id=getattr(game_params, 'game_id', None))

    if getattr(game_params, 'realtime', False):
        clock = GameClock(
            on_move=game.movement_tick,
            on_rotate=game.rotate_tick,
            is_over=lambda: game.game_over,
            tick_ms=config.TICK_MS,
            rotate_ms=config.ROTATE_MS,
        )
        clock.run()
    else:
        clock = LockstepClock(
            on_move=game.movement_tick,
            on_rotate=game.rotate_tick,
            is_over=lambda: game.game_over,
            ratio=max(1, config.TICK_MS // config.ROTATE_MS),
            max_ticks=getattr(game_params, 'max_ticks', config.MAX_TICKS),
        )
        clock.run()

    state = game.get_current_state()
    logger.debug("Final board:\n%s", state.print_board())

    if not getattr(game_params, 'no_save', False):
        game.save_history_to_json()

    frames_dir = getattr(game_params, 'frames', None)
    gif_path = getattr(game_params, 'gif', None)
    if frames_dir or gif_path:
        from services.replay_renderer import WyrmFrameRenderer
        renderer = WyrmFrameRenderer()
        replay = game.replay()
        if frames_dir:
            renderer.render_replay(replay, frames_dir)
        if gif_path:
            renderer.save_gif(replay, gif_path)

    return {
        "game_id": game.game_id,
        "final_score": state.score,
        "state": state.state,
        "level": state.level,
        "ticks": state.tick,
        "death_reason": state.death_reason,
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a headless game of Uncle Wyrm with a steering player."
    )
    parser.add_argument("--player", type=str, required=False, default="chase",
                        choices=HEADLESS_VARIANTS,
                        help="Steering player variant")
    parser.add_argument("--max_ticks", type=int, required=False, default=config.MAX_TICKS,
                        help="Stop a lockstep game after this many movement ticks")
    parser.add_argument("--seed", type=int, required=False, default=config.SEED,
                        help="Seed for apple placement and random steering")
    parser.add_argument("--realtime", action="store_true",
                        help="Drive ticks on the wall clock instead of lockstep")
    parser.add_argument("--frames", type=str, required=False, default=None,
                        help="Directory to write PNG frames into")
    parser.add_argument("--gif", type=str, required=False, default=None,
                        help="Path of an animated GIF to write")
    parser.add_argument("--no-save", dest="no_save", action="store_true",
                        help="Do not write the replay JSON")
    return parser


def main():
    args = build_parser().parse_args()

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    result = run_simulation(args.player, args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()

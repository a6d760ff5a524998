# main.py
import argparse
import logging
import random

import arcade

from game_view import GameView
from highscore_store import HighScoreStore, MemoryScoreStore
from settings import WIDTH, HEIGHT, TITLE, DAY_BG, HIGH_SCORE_FILE
from simulation import Simulation
from start_view import StartView


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"{TITLE}: jump and duck past the desert traffic")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--high-score-file", default=str(HIGH_SCORE_FILE),
                        help=f"where the high score is kept (default: {HIGH_SCORE_FILE})")
    parser.add_argument("--no-save", action="store_true",
                        help="keep the high score in memory only")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible run")
    parser.add_argument("--fullscreen", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    store = MemoryScoreStore() if args.no_save else HighScoreStore(args.high_score_file)
    window = arcade.Window(WIDTH, HEIGHT, TITLE, resizable=True, fullscreen=args.fullscreen)
    window.background_color = DAY_BG

    simulation = Simulation(window.width, window.height, store=store, rng=random.Random(args.seed))
    logger.info("%s starting (high score %d)", TITLE, simulation.world.high_score)

    game = GameView(simulation)
    window.show_view(StartView(game))
    arcade.run()


if __name__ == "__main__":
    main()

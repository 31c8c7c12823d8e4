# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import argparse
import logging
from typing import Any

from merge2048.config import GameConfiguration
from merge2048.core import BOARD_SIZE
from merge2048.envs import TwentyFortyEight
from merge2048.utils.windows import WindowBoard


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse the command line.

    Parameters
    ----------
    argv: list, optional
        Arguments to parse, ``sys.argv[1:]`` when omitted

    Returns
    -------
    Namespace
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Play 2048 with the arrow keys.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random source.")
    parser.add_argument("--store", type=str, default=None, help="JSON file keeping the best score.")
    parser.add_argument("--no-store", action="store_true", help="Do not persist the best score.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
    )
    return parser.parse_args(argv)


def key_handler(game: TwentyFortyEight, window: Any, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: TwentyFortyEight
        The game shell

    window: WindowBoard
        Class to draw the game

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    command = game.KEY_BINDINGS.get(event.key)
    if command is not None:
        window.show_state(game.dispatch(command))
    return None


def main(argv: list[str] | None = None):
    """Open a window and play until it is closed."""
    config = GameConfiguration.from_args(parse_args(argv))
    logging.basicConfig(level=config.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game = TwentyFortyEight(config=config)
    window = WindowBoard(title="2048 Game", size=BOARD_SIZE)
    window.register_key_handler(lambda event: key_handler(game, window, event))
    window.show_state(game.state)

    # Blocking event loop
    window.show(block=True)


if __name__ == "__main__":
    main()

# -*- coding: utf-8 -*-
"""
Configuration for a 2048 game session.
"""

from argparse import Namespace
from dataclasses import dataclass, field
from pathlib import Path

from merge2048.core.gameboard import WINNING_TILE


def _default_store_path() -> Path:
    return Path.home() / '.merge2048.json'


@dataclass
class GameConfiguration:
    """
    Game session configuration.

    Attributes are grouped by concern: rules, persistence, randomness and logging.
    """

    # ##>: Rules.
    winning_tile: int = WINNING_TILE

    # ##>: Best score persistence. ``store_path=None`` disables it.
    best_score_key: str = '2048-best-score'
    store_path: Path | None = field(default_factory=_default_store_path)

    # ##>: Random source seed, None for entropy.
    seed: int | None = None

    # ##>: Root logger level name.
    log_level: str = 'WARNING'

    @classmethod
    def from_args(cls, args: Namespace) -> 'GameConfiguration':
        """
        Build a configuration from parsed command line arguments.

        Parameters
        ----------
        args : Namespace
            Arguments holding ``seed``, ``store``, ``no_store`` and ``log_level``.

        Returns
        -------
        GameConfiguration
            Configuration where unspecified arguments keep their default.
        """
        config = cls(seed=args.seed, log_level=args.log_level)
        if args.no_store:
            config.store_path = None
        elif args.store is not None:
            config.store_path = Path(args.store)
        return config

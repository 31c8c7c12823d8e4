# -*- coding: utf-8 -*-
"""
Pure board engine for the 2048 game.

It includes functions for creating grids, spawning tiles, sliding and merging lines in the four directions,
and detecting won and terminal grids. No function here mutates its input.
"""

from .gameboard import (
    BOARD_SIZE,
    TILE_SPAWN_PROBS,
    WINNING_TILE,
    as_grid,
    can_move,
    create_empty_grid,
    has_won,
    initialize_grid,
    is_game_over,
    make_rng,
    max_tile,
    spawn_random_tile,
)
from .gamemove import (
    ACTIONS,
    Direction,
    is_noop,
    merge_line,
    move,
    move_down,
    move_left,
    move_right,
    move_up,
    slide_and_merge,
)

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "WINNING_TILE",
    "ACTIONS",
    "Direction",
    "as_grid",
    "can_move",
    "create_empty_grid",
    "has_won",
    "initialize_grid",
    "is_game_over",
    "make_rng",
    "max_tile",
    "spawn_random_tile",
    "is_noop",
    "merge_line",
    "move",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "slide_and_merge",
]

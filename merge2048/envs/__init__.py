# -*- coding: utf-8 -*-
"""
Session layer of the 2048 game.

This module provides the immutable `SessionState` with its turn transitions, and the `TwentyFortyEight`
shell which holds one state and applies player commands to it.
"""

from .session import SessionState, apply_move, continue_game, new_session, reset_session
from .twentyfortyeight import TwentyFortyEight

__all__ = ["SessionState", "TwentyFortyEight", "apply_move", "continue_game", "new_session", "reset_session"]

# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This package provides the pure board engine (`merge2048.core`) and the `TwentyFortyEight` session shell.
"""

from .envs import SessionState, TwentyFortyEight

__all__ = ["SessionState", "TwentyFortyEight"]
__version__ = "1.0.0"

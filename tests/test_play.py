"""
Tests for the command line entry point and the keyboard handler.
"""

import io
from contextlib import redirect_stderr
from pathlib import Path
from types import SimpleNamespace
from unittest import TestCase, main

from merge2048.config import GameConfiguration
from merge2048.core.gameboard import as_grid, make_rng
from merge2048.envs import SessionState, TwentyFortyEight
from merge2048.play import key_handler, parse_args
from merge2048.utils.storage import MemoryStore
from merge2048.utils.windows import WindowBoard


class FakeWindow:
    """Window recording what it was asked to draw."""

    def __init__(self):
        self.shown = []
        self.closed = False

    def show_state(self, state):
        self.shown.append(state)

    def close(self):
        self.closed = True


class TestKeyHandler(TestCase):
    def setUp(self):
        self.game = TwentyFortyEight(store=MemoryStore(), rng=make_rng(0))
        self.window = FakeWindow()

    def press(self, key: str):
        key_handler(self.game, self.window, SimpleNamespace(key=key))

    def test_arrow_key_moves(self):
        self.game._state = SessionState(grid=as_grid([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]))
        self.press('left')
        self.assertEqual(len(self.window.shown), 1)
        self.assertEqual(self.window.shown[0].score, 4)

    def test_reset_key(self):
        self.game._state = SessionState(grid=as_grid([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]), score=8, best_score=8)
        self.press('r')
        self.assertEqual(self.window.shown[-1].score, 0)
        self.assertEqual(self.window.shown[-1].best_score, 8)

    def test_continue_key(self):
        self.game._state = SessionState(grid=as_grid([[2048, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4]), won=True)
        self.press('c')
        self.assertFalse(self.window.shown[-1].won)

    def test_escape_closes(self):
        self.press('escape')
        self.assertTrue(self.window.closed)
        self.assertEqual(self.window.shown, [])

    def test_unbound_key_ignored(self):
        self.press('q')
        self.assertEqual(self.window.shown, [])


class TestArguments(TestCase):
    def test_defaults(self):
        config = GameConfiguration.from_args(parse_args([]))
        self.assertIsNone(config.seed)
        self.assertEqual(config.log_level, 'WARNING')
        self.assertEqual(config.store_path, GameConfiguration().store_path)

    def test_store_options(self):
        config = GameConfiguration.from_args(parse_args(['--store', 'scores.json', '--seed', '3']))
        self.assertEqual(config.store_path, Path('scores.json'))
        self.assertEqual(config.seed, 3)

        config = GameConfiguration.from_args(parse_args(['--no-store', '--log-level', 'debug']))
        self.assertIsNone(config.store_path)
        self.assertEqual(config.log_level, 'DEBUG')

    def test_unknown_log_level_rejected(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            parse_args(['--log-level', 'verbose'])


class TestWindowStatus(TestCase):
    def test_status_line(self):
        grid = as_grid([[2048, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        self.assertEqual(WindowBoard.status(SessionState(grid=grid, score=10, best_score=20)), 'Score: 10    Best: 20')
        self.assertIn('You win!', WindowBoard.status(SessionState(grid=grid, won=True)))
        self.assertIn('Game over!', WindowBoard.status(SessionState(grid=grid, game_over=True)))

    def test_status_hides_dismissed_win(self):
        grid = as_grid([[2048, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        status = WindowBoard.status(SessionState(grid=grid, won=True, win_dismissed=True))
        self.assertNotIn('You win!', status)


if __name__ == '__main__':
    main()

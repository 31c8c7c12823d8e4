"""2048 game shell: owns the session state and serializes player commands."""

import logging
from threading import Lock

from numpy.random import Generator

from merge2048.config import GameConfiguration
from merge2048.core.gameboard import make_rng, max_tile
from merge2048.core.gamemove import ACTIONS
from merge2048.envs.session import SessionState, apply_move, continue_game, new_session, reset_session
from merge2048.utils.storage import BestScoreStore, load_best_score, open_store, save_best_score

# ##>: Module logger.
logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game shell.

    This class holds the current ``SessionState`` and applies player commands to it one at a time,
    persisting the best score through a storage backend.
    """

    # ##: All commands.
    COMMANDS = (*ACTIONS, 'reset', 'continue')

    # ##: Keyboard keys to commands.
    KEY_BINDINGS = {
        'left': 'left',
        'right': 'right',
        'up': 'up',
        'down': 'down',
        'r': 'reset',
        'backspace': 'reset',
        'c': 'continue',
    }

    def __init__(
        self,
        config: GameConfiguration | None = None,
        store: BestScoreStore | None = None,
        rng: Generator | None = None,
    ):
        """
        Initialize the shell and start a first game.

        Parameters
        ----------
        config : GameConfiguration, optional
            Session configuration (default configuration when omitted).
        store : BestScoreStore, optional
            Best score backend. Opened from ``config.store_path`` when omitted.
        rng : Generator, optional
            Random source. Built from ``config.seed`` when omitted.
        """
        self.config = config if config is not None else GameConfiguration()
        self._store = store if store is not None else open_store(self.config.store_path)
        self._rng = rng if rng is not None else make_rng(self.config.seed)
        self._lock = Lock()

        best_score = load_best_score(self._store, self.config.best_score_key)
        self._state = new_session(best_score=best_score, rng=self._rng)

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    def _commit(self, state: SessionState) -> SessionState:
        # ##>: Caller holds the lock.
        previous, self._state = self._state, state
        if state.best_score > previous.best_score:
            logger.info('New best score: %d', state.best_score)
            save_best_score(self._store, self.config.best_score_key, state.best_score)
        if state.show_win and not previous.show_win:
            logger.info('Reached %d with score %d', self.config.winning_tile, state.score)
        if state.game_over and not previous.game_over:
            logger.info('Game over with score %d and max tile %d', state.score, max_tile(state.grid))
        return state

    def step(self, direction) -> SessionState:
        """
        Apply a move to the current game.

        Parameters
        ----------
        direction : Direction, int or str
            The move direction.

        Returns
        -------
        SessionState
            The state after the turn, unchanged when the move was ignored or had no effect.
        """
        with self._lock:
            state, changed = apply_move(
                self._state, direction, rng=self._rng, winning_tile=self.config.winning_tile
            )
            logger.debug('Move %s: changed=%s score=%d', direction, changed, state.score)
            if not changed:
                return self._state
            return self._commit(state)

    def reset(self) -> SessionState:
        """Start a new game, keeping the best score."""
        with self._lock:
            logger.debug('Reset game with score %d', self._state.score)
            return self._commit(reset_session(self._state, rng=self._rng))

    def continue_game(self) -> SessionState:
        """Keep playing after a win."""
        with self._lock:
            return self._commit(continue_game(self._state))

    def dispatch(self, command: str) -> SessionState:
        """
        Run a named command.

        Parameters
        ----------
        command : str
            One of ``left``, ``right``, ``up``, ``down``, ``reset`` or ``continue``.

        Returns
        -------
        SessionState
            The state after the command.

        Raises
        ------
        ValueError
            If the command is unknown.
        """
        if command in ACTIONS:
            return self.step(ACTIONS[command])
        if command == 'reset':
            return self.reset()
        if command == 'continue':
            return self.continue_game()
        raise ValueError(f'Unknown command: {command!r}')

    def render(self) -> None:
        """
        Render the game. This method prints the score and the grid to the console.
        """
        state = self._state
        print(f'Score: {state.score}\tBest: {state.best_score}')
        for row in state.grid.tolist():
            print(' \t'.join(str(value) if value else '.' for value in row))
        if state.show_win:
            print('You win!')
        elif state.game_over:
            print('Game over!')

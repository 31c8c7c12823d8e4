# -*- coding: utf-8 -*-
"""
Immutable session state of a 2048 game and the pure transitions between states.
"""

from dataclasses import dataclass, replace

from numpy import ndarray
from numpy.random import Generator

from merge2048.core.gameboard import WINNING_TILE, has_won, initialize_grid, is_game_over, spawn_random_tile
from merge2048.core.gamemove import Direction, is_noop, move


@dataclass(frozen=True, eq=False)
class SessionState:
    """
    Everything needed to render one game.

    Attributes
    ----------
    grid : ndarray
        Current read-only grid.
    score : int
        Running score of the current game.
    best_score : int
        Highest score seen, carried across games.
    game_over : bool
        True when no move can change the grid.
    won : bool
        True while the winning tile is on the grid, recomputed after every accepted move.
    win_dismissed : bool
        True once the player chose to continue after winning, until the next reset.
    """

    grid: ndarray
    score: int = 0
    best_score: int = 0
    game_over: bool = False
    won: bool = False
    win_dismissed: bool = False

    @property
    def accepts_moves(self) -> bool:
        """A lost game is frozen; a won game keeps accepting moves even when over."""
        return not self.game_over or self.won

    @property
    def show_win(self) -> bool:
        """Whether the win still has to be announced to the player."""
        return self.won and not self.win_dismissed


def new_session(best_score: int = 0, rng: Generator | None = None) -> SessionState:
    """
    Start a game on a fresh grid with two random tiles.

    Parameters
    ----------
    best_score : int, optional
        Best score to carry into the game (default is 0).
    rng : Generator, optional
        Random source for the initial tiles.

    Returns
    -------
    SessionState
        State with a zero score and cleared flags.
    """
    return SessionState(grid=initialize_grid(rng=rng), best_score=best_score)


def reset_session(state: SessionState, rng: Generator | None = None) -> SessionState:
    """Start a new game, keeping only the best score of ``state``."""
    return new_session(best_score=state.best_score, rng=rng)


def continue_game(state: SessionState) -> SessionState:
    """Dismiss a win: clear the won flag for the rest of the game and leave everything else untouched."""
    return replace(state, won=False, win_dismissed=True)


def apply_move(
    state: SessionState,
    direction: Direction | int | str,
    rng: Generator | None = None,
    winning_tile: int = WINNING_TILE,
) -> tuple[SessionState, bool]:
    """
    Play one turn.

    Parameters
    ----------
    state : SessionState
        State before the turn. It is never modified.
    direction : Direction, int or str
        Move direction.
    rng : Generator, optional
        Random source for the spawned tile.
    winning_tile : int, optional
        Tile value that wins the game (default is 2048).

    Returns
    -------
    new_state : SessionState
        State after the turn, or ``state`` itself when the turn had no effect.
    changed : bool
        Whether the move was accepted.

    Notes
    -----
    - Input is ignored when the game is lost (over and not won).
    - A move that leaves the grid unchanged spawns nothing and scores nothing.
    - Otherwise one tile spawns, the score and best score grow, and both flags are recomputed on the
      grid after the spawn.
    """
    if not state.accepts_moves:
        return state, False

    # ##: Applied action and get reward.
    moved, reward = move(state.grid, direction)
    if is_noop(state.grid, moved):
        return state, False

    # ##: Fill randomly one cell.
    grid = spawn_random_tile(moved, rng=rng)
    score = state.score + reward

    return (
        SessionState(
            grid=grid,
            score=score,
            best_score=max(state.best_score, score),
            game_over=is_game_over(grid),
            won=has_won(grid, winning_tile),
            win_dismissed=state.win_dismissed,
        ),
        True,
    )

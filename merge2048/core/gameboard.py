"""
Grid primitives for the 2048 game: creation, random tile spawning and terminal-state checks.
"""

from numpy import any as np_any
from numpy import argwhere, array, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

# ##>: Fixed board dimension.
BOARD_SIZE = 4

# ##>: Tile value that wins the game.
WINNING_TILE = 2048

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator used when no random source is injected.
_GENERATOR = default_rng(PCG64DXSM())


def make_rng(seed: int | None = None) -> Generator:
    """
    Build the random source used for tile placement and tile values.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducibility. A fresh entropy-seeded generator is built when omitted.

    Returns
    -------
    Generator
        A numpy generator backed by PCG64DXSM.
    """
    return Generator(PCG64DXSM(seed))


def freeze(grid: ndarray) -> ndarray:
    """
    Mark a grid as read-only so later code cannot mutate it in place.

    Parameters
    ----------
    grid : ndarray
        Grid owned by the caller. It must not be shared with code that writes to it.

    Returns
    -------
    ndarray
        The same array, flagged as non writeable.
    """
    grid.flags.writeable = False
    return grid


def as_grid(cells) -> ndarray:
    """
    Build a frozen grid from nested rows, using ``None`` or ``0`` for empty cells.

    Parameters
    ----------
    cells : sequence of sequences or ndarray
        Row-major cell values.

    Returns
    -------
    ndarray
        A read-only ``BOARD_SIZE x BOARD_SIZE`` int64 array.

    Raises
    ------
    ValueError
        If the cells do not describe a square grid of the board size.
    """
    rows = [[0 if value is None else value for value in row] for row in cells]
    grid = array(rows, dtype=int64)
    check_shape(grid)
    return freeze(grid)


def check_shape(grid: ndarray) -> None:
    """Raise ``ValueError`` unless ``grid`` is a ``BOARD_SIZE x BOARD_SIZE`` matrix."""
    if grid.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'grid must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {grid.shape}')


def create_empty_grid() -> ndarray:
    """
    Create a grid where every cell is empty.

    Returns
    -------
    ndarray
        A read-only ``BOARD_SIZE x BOARD_SIZE`` array of zeros.
    """
    return freeze(zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64))


def spawn_random_tile(grid: ndarray, rng: Generator | None = None) -> ndarray:
    """
    Place a new tile (2 or 4) on one uniformly chosen empty cell.

    Parameters
    ----------
    grid : ndarray
        The current grid. It is never modified.
    rng : Generator, optional
        Random source. The module-level generator is used when omitted.

    Returns
    -------
    ndarray
        A new grid with exactly one more tile, or ``grid`` itself when it has no empty cell.

    Notes
    -----
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - A full grid is not an error: the call is a no-op.
    """
    check_shape(grid)
    rng = rng if rng is not None else _GENERATOR

    # ##: Only if there are still available places.
    available_cells = argwhere(grid == 0)
    if len(available_cells) == 0:
        return grid

    # ##: Randomly choose the cell then its value.
    cell = tuple(available_cells[rng.integers(len(available_cells))])
    value = rng.choice(_TILE_VALUES, p=_TILE_PROBS)

    new_grid = grid.copy()
    new_grid[cell] = value
    return freeze(new_grid)


def initialize_grid(rng: Generator | None = None) -> ndarray:
    """
    Create the starting grid of a game: an empty grid with two random tiles.

    Parameters
    ----------
    rng : Generator, optional
        Random source. The module-level generator is used when omitted.

    Returns
    -------
    ndarray
        A fresh read-only grid holding exactly two tiles.
    """
    grid = create_empty_grid()
    grid = spawn_random_tile(grid, rng=rng)
    return spawn_random_tile(grid, rng=rng)


def can_move(grid: ndarray) -> bool:
    """
    Check whether any further play is possible.

    Parameters
    ----------
    grid : ndarray
        The grid to check.

    Returns
    -------
    bool
        True if a cell is empty or two horizontally or vertically adjacent cells hold the same value.
    """
    if not grid.all():
        return True

    # ##>: Full grid, so equal neighbours are necessarily non-empty.
    return bool(np_any(grid[:-1] == grid[1:]) or np_any(grid[:, :-1] == grid[:, 1:]))


def is_game_over(grid: ndarray) -> bool:
    """True when no move can change ``grid``."""
    return not can_move(grid)


def has_won(grid: ndarray, winning_tile: int = WINNING_TILE) -> bool:
    """
    Check whether the winning tile is on the grid.

    Parameters
    ----------
    grid : ndarray
        The grid to check.
    winning_tile : int, optional
        Target tile value (default is 2048).

    Returns
    -------
    bool
        True if at least one cell equals ``winning_tile``.

    Notes
    -----
    Winning does not end the game; this stays true on every later turn while the tile survives.
    """
    return bool(np_any(grid == winning_tile))


def max_tile(grid: ndarray) -> int:
    """Return the largest tile on the grid, 0 for an empty grid."""
    return int(grid.max())

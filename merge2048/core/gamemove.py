"""
Move resolution for the 2048 game: compaction and pairwise merging of every line in one of four directions.
"""

from enum import IntEnum

from numpy import array, array_equal, ndarray, rot90, zeros_like

from merge2048.core.gameboard import check_shape, freeze


class Direction(IntEnum):
    """
    Move direction.

    The value is the number of counter-clockwise quarter turns that bring the direction to "left",
    so every move can be resolved by a single left slide on a rotated grid.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Convert a direction name, index or member into a ``Direction``.

        Raises
        ------
        ValueError
            If ``value`` names no direction.
        """
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f'Unknown direction: {value!r}') from None
        return cls(value)


# ##: All Actions.
ACTIONS = {direction.name.lower(): direction for direction in Direction}


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Compact a line toward index 0 and merge adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column of the grid.

    Returns
    -------
    score : int
        The sum of the tiles created by merges.
    merged_line : ndarray
        The non-empty values after merging, without padding.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the line towards the end.
    - A tile created by a merge is never merged again in the same call.

    Examples
    --------
    >>> merge_line(array([2, 2, 4, 4]))
    (12, array([4, 8]))

    >>> merge_line(array([2, 0, 2, 2]))
    (4, array([4, 2]))
    """
    # ##: Handle empty lines.
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    # ##: Iterate over the line and merge values.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result.append(merged)
            score += int(merged)
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(grid: ndarray) -> tuple[int, ndarray]:
    """
    Slide the grid to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    grid : ndarray
        The grid as a 2D array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_grid : ndarray
        A new array holding the grid after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the grid before calling this function.
    - Empty cells are added to the right side of each row after merging.
    """
    result = zeros_like(grid)
    score = 0

    for i, row in enumerate(grid):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def move(grid: ndarray, direction: Direction | int | str) -> tuple[ndarray, int]:
    """
    Apply a directional move to every line of the grid.

    Parameters
    ----------
    grid : ndarray
        The current grid. It is never modified.
    direction : Direction, int or str
        The direction to move (0: left, 1: up, 2: right, 3: down, or the lowercase name).

    Returns
    -------
    new_grid : ndarray
        A new read-only grid after compaction and merging.
    score : int
        The sum of the tiles created by merges during this move.

    Notes
    -----
    No tile is spawned here. Compare the result with ``is_noop`` to know whether the move changed anything.
    """
    check_shape(grid)
    action = Direction.parse(direction)

    rotated = rot90(grid, k=action)
    score, updated = slide_and_merge(rotated)
    return freeze(rot90(updated, k=-action).copy()), score


def move_left(grid: ndarray) -> tuple[ndarray, int]:
    return move(grid, Direction.LEFT)


def move_right(grid: ndarray) -> tuple[ndarray, int]:
    return move(grid, Direction.RIGHT)


def move_up(grid: ndarray) -> tuple[ndarray, int]:
    return move(grid, Direction.UP)


def move_down(grid: ndarray) -> tuple[ndarray, int]:
    return move(grid, Direction.DOWN)


def is_noop(old: ndarray, new: ndarray) -> bool:
    """True when the move left the grid identical, cell for cell."""
    return bool(array_equal(old, new))

"""
Board snapshots and pure predicates over them.

A board is an immutable N x N grid of optional tiles, stored as a tuple of row tuples. Every
function here returns new boards and never mutates its input. Value-level checks go through a
NumPy view of the board (0 for an empty cell).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from numpy import any as np_any
from numpy import array, array_equal, int64, ndarray

from tilemerge.core.tile import Tile, TileFactory, default_factory

Board = tuple[tuple[Tile | None, ...], ...]

# ##>: Default and minimal grid sizes.
DEFAULT_SIZE = 4
MIN_SIZE = 2

# ##>: A tile of this value wins the game.
WIN_VALUE = 2048


def init_board(size: int = DEFAULT_SIZE) -> Board:
    """
    Create an empty square board.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    Board
        A ``size`` x ``size`` board with no tile.

    Raises
    ------
    ValueError
        If ``size`` is smaller than 2.
    """
    if size < MIN_SIZE:
        raise ValueError(f'size must be >= {MIN_SIZE}, got {size}')
    return tuple((None,) * size for _ in range(size))


def as_board(rows: Sequence[Sequence[Tile | None]]) -> Board:
    """Freeze any grid of optional tiles into a board."""
    return tuple(tuple(row) for row in rows)


def board_values(board: Sequence[Sequence[Tile | None]]) -> ndarray:
    """
    Get the values of a board.

    Parameters
    ----------
    board : Board
        The board to read.

    Returns
    -------
    ndarray
        A 2D integer array holding the value of every tile, 0 for empty cells.
    """
    return array([[0 if tile is None else tile.value for tile in row] for row in board], dtype=int64)


def board_from_values(values: Sequence[Sequence[int]] | ndarray, factory: TileFactory | None = None) -> Board:
    """
    Build a board from a grid of values.

    Parameters
    ----------
    values : Sequence[Sequence[int]] | ndarray
        Tile values, 0 for empty cells.
    factory : TileFactory, optional
        Factory used to allocate the tiles.

    Returns
    -------
    Board
        A board holding a fresh tile for each non-zero value.
    """
    factory = factory or default_factory()
    return tuple(tuple(factory.create(int(value)) if value else None for value in row) for row in values)


def get_empty_positions(board: Sequence[Sequence[Tile | None]]) -> list[tuple[int, int]]:
    """Return the ``(row, col)`` positions of all empty cells, in row-major order."""
    return [(i, j) for i, row in enumerate(board) for j, tile in enumerate(row) if tile is None]


def count_non_empty_tiles(board: Sequence[Sequence[Tile | None]]) -> int:
    """Return the number of occupied cells."""
    return sum(tile is not None for row in board for tile in row)


def clone_board(board: Sequence[Sequence[Tile | None]]) -> Board:
    """
    Copy a board structurally.

    Parameters
    ----------
    board : Board
        The board to copy.

    Returns
    -------
    Board
        A new board whose rows and tiles are new objects with the same fields.
    """
    return tuple(tuple(None if tile is None else replace(tile) for tile in row) for row in board)


def boards_equal(first: Sequence[Sequence[Tile | None]], second: Sequence[Sequence[Tile | None]]) -> bool:
    """
    Check whether two boards hold the same values at the same positions.

    Identifiers and presentation flags are ignored.
    """
    return bool(array_equal(board_values(first), board_values(second)))


def can_move(board: Sequence[Sequence[Tile | None]]) -> bool:
    """
    Check whether any move is still possible.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    bool
        True if a cell is empty or two adjacent tiles share the same value.

    Notes
    -----
    - Empty cells are checked first, adjacent pairs are only compared on a full board.
    - Both horizontal and vertical neighbours are considered.
    """
    if get_empty_positions(board):
        return True

    values = board_values(board)
    return bool(np_any(values[:, :-1] == values[:, 1:]) or np_any(values[:-1] == values[1:]))


def is_game_over(board: Sequence[Sequence[Tile | None]]) -> bool:
    """Check if the game has ended, i.e. no move is possible."""
    return not can_move(board)


def check_win(board: Sequence[Sequence[Tile | None]], target: int = WIN_VALUE) -> bool:
    """
    Check if a tile reached the winning value.

    Parameters
    ----------
    board : Board
        The board to check.
    target : int, optional
        The winning value (default is 2048).

    Returns
    -------
    bool
        True if at least one tile has exactly the winning value.
    """
    return bool(np_any(board_values(board) == target))


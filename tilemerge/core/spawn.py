"""
Random tile spawning.

The random source is always injectable: pass a seeded ``numpy.random.Generator`` (or any object
with ``integers`` and ``random`` methods) to get reproducible spawns.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.gameboard import Board, as_board, get_empty_positions
from tilemerge.core.tile import Tile, TileFactory, default_factory

logger = logging.getLogger(__name__)

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Number of tiles placed on a new board.
INITIAL_TILES = 2

# ##>: Module-level generator used when no random source is given.
_GENERATOR = default_rng(PCG64DXSM())


def spawn_tile(
    board: Sequence[Sequence[Tile | None]], rng: Generator | None = None, factory: TileFactory | None = None
) -> Board:
    """
    Place a new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    board : Board
        The current board. It is left untouched.
    rng : Generator, optional
        Random source for the cell and value draws (default is a module-level generator).
    factory : TileFactory, optional
        Factory used to allocate the new tile.

    Returns
    -------
    Board
        A new board with one more tile, flagged ``is_new``.

    Notes
    -----
    - The cell is drawn uniformly among empty cells, in row-major order.
    - The value is 2 with probability 0.9 and 4 otherwise.
    - A full board is returned unchanged.
    """
    board = as_board(board)
    empty = get_empty_positions(board)
    if not empty:
        return board

    rng = rng if rng is not None else _GENERATOR
    factory = factory or default_factory()

    # ##: Draw the cell, then the value.
    row, col = empty[int(rng.integers(len(empty)))]
    value = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    tile = factory.create(value, is_new=True)
    logger.debug('Spawn %d at (%d, %d)', value, row, col)

    rows = [list(line) for line in board]
    rows[row][col] = tile
    return as_board(rows)


def fill_cells(
    board: Sequence[Sequence[Tile | None]],
    number_tile: int,
    rng: Generator | None = None,
    factory: TileFactory | None = None,
) -> Board:
    """
    Spawn several tiles one after another.

    Parameters
    ----------
    board : Board
        The current board.
    number_tile : int
        Number of tiles to add. Stops early once the board is full.
    rng : Generator, optional
        Random source for the draws.
    factory : TileFactory, optional
        Factory used to allocate the new tiles.

    Returns
    -------
    Board
        The board with the new tiles.
    """
    board = as_board(board)
    for _ in range(number_tile):
        board = spawn_tile(board, rng=rng, factory=factory)
    return board

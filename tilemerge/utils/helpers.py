"""Debug and statistics helpers derived from a board snapshot."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tilemerge.core.gameboard import board_values
from tilemerge.core.tile import Tile


@dataclass(frozen=True)
class BoardStats:
    """Summary numbers of a board."""

    max_tile: int
    total_sum: int
    tile_count: int
    grid_size: int


def board_to_string(board: Sequence[Sequence[Tile | None]]) -> str:
    """
    Render a board as text for debugging.

    Each cell is its value right-aligned on five characters, or ``.....`` when empty. Cells are
    separated by ``|`` and rows by newlines.
    """
    return '\n'.join('|'.join('.....' if tile is None else f'{tile.value:>5}' for tile in row) for row in board)


def get_tiles_flat(board: Sequence[Sequence[Tile | None]]) -> list[Tile]:
    """Return all tiles of the board in row-major order."""
    return [tile for row in board for tile in row if tile is not None]


def get_tile_count(board: Sequence[Sequence[Tile | None]]) -> int:
    """Return the number of tiles on the board."""
    return len(get_tiles_flat(board))


def get_occupied_positions(board: Sequence[Sequence[Tile | None]]) -> list[tuple[int, int]]:
    """Return the ``(row, col)`` positions of all tiles, in row-major order."""
    return [(i, j) for i, row in enumerate(board) for j, tile in enumerate(row) if tile is not None]


def get_max_tile(board: Sequence[Sequence[Tile | None]]) -> int:
    """Return the highest tile value, or 0 for an empty board."""
    return int(board_values(board).max(initial=0))


def format_score(score: int) -> str:
    """Format a score with thousands separators, e.g. ``'1,234,567'``."""
    return f'{score:,}'


def calculate_stats(board: Sequence[Sequence[Tile | None]]) -> BoardStats:
    """
    Compute summary statistics of a board.

    Parameters
    ----------
    board : Board
        The board to summarize.

    Returns
    -------
    BoardStats
        Highest tile, sum of all values, number of tiles and grid size.
    """
    values = board_values(board)
    return BoardStats(
        max_tile=int(values.max(initial=0)),
        total_sum=int(values.sum()),
        tile_count=int((values != 0).sum()),
        grid_size=len(board),
    )

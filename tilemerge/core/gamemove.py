"""
Directional moves for the sliding-tile merge game.

All four directions are reduced to a leftward slide of every row: the board is reversed and/or
transposed before the line transform, then restored afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from numpy import array_equal

from tilemerge.core.gameboard import Board, as_board, board_values
from tilemerge.core.line import transform_line
from tilemerge.core.tile import Tile, TileFactory

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Slide direction requested by the player."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single slide, before any tile is spawned.

    Attributes
    ----------
    board : Board
        The board after sliding and merging.
    score_gain : int
        Sum of the values created by merges.
    moved : bool
        Whether any tile value changed position.
    """

    board: Board
    score_gain: int
    moved: bool


def _transpose(board: Board) -> Board:
    return tuple(zip(*board))


def _reverse(board: Board) -> Board:
    return tuple(row[::-1] for row in board)


def _orient(board: Board, direction: Direction) -> Board:
    """Reorient the board so that the requested move becomes a leftward slide."""
    if direction is Direction.RIGHT:
        return _reverse(board)
    if direction is Direction.UP:
        return _transpose(board)
    if direction is Direction.DOWN:
        return _reverse(_transpose(board))
    return board


def _restore(board: Board, direction: Direction) -> Board:
    """Undo ``_orient``."""
    if direction is Direction.RIGHT:
        return _reverse(board)
    if direction is Direction.UP:
        return _transpose(board)
    if direction is Direction.DOWN:
        return _transpose(_reverse(board))
    return board


def slide_and_merge(board: Board, factory: TileFactory | None = None) -> tuple[int, Board]:
    """
    Slide every row of the board to the left and merge its tiles.

    Parameters
    ----------
    board : Board
        The board, already oriented toward the left.
    factory : TileFactory, optional
        Factory used to allocate merged tiles.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : Board
        The board after sliding and merging.
    """
    rows = []
    score = 0

    for row in board:
        merged_row, score_row = transform_line(row, factory=factory)
        score += score_row
        rows.append(merged_row)

    return score, tuple(rows)


def move(
    board: Sequence[Sequence[Tile | None]], direction: Direction | str, factory: TileFactory | None = None
) -> MoveResult:
    """
    Slide all tiles of the board in one direction.

    Parameters
    ----------
    board : Board
        The current board. It is left untouched.
    direction : Direction | str
        One of ``'up'``, ``'down'``, ``'left'`` or ``'right'``.
    factory : TileFactory, optional
        Factory used to allocate merged tiles.

    Returns
    -------
    MoveResult
        The new board, the score earned and whether the board changed.

    Raises
    ------
    ValueError
        If ``direction`` is not a known direction.

    Notes
    -----
    - ``moved`` compares tile values only; identifiers and flags are ignored.
    - The returned board never shares rows with the input, even when nothing moved.
    """
    direction = Direction(direction)
    board = as_board(board)

    score, updated = slide_and_merge(_orient(board, direction), factory=factory)
    updated = _restore(updated, direction)

    moved = not array_equal(board_values(board), board_values(updated))
    logger.debug('Move %s: moved=%s, score_gain=%d', direction.value, moved, score)
    return MoveResult(board=updated, score_gain=score, moved=moved)

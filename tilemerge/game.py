"""
Game-level transitions: one user move, session initialization and session snapshots.

The engine never owns a session. Callers keep the current ``GameState`` and replace it with the
value returned by ``apply_play_result`` after each ``play_move``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from numpy.random import Generator

from tilemerge.core.gameboard import DEFAULT_SIZE, WIN_VALUE, Board, check_win, init_board, is_game_over
from tilemerge.core.gamemove import Direction, move
from tilemerge.core.spawn import INITIAL_TILES, fill_cells, spawn_tile
from tilemerge.core.tile import Tile, TileFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderHint:
    """
    Presentation hint for one tile touched by the last transition.

    Attributes
    ----------
    row : int
        Row of the tile on the resulting board.
    col : int
        Column of the tile on the resulting board.
    tile_id : str
        Identifier of the tile.
    kind : str
        ``'new'`` for a spawned tile, ``'merged'`` for a tile produced by a merge.
    """

    row: int
    col: int
    tile_id: str
    kind: str


@dataclass(frozen=True)
class PlayResult:
    """
    Outcome of a full user move: slide, spawn and terminal evaluation.

    Attributes
    ----------
    board : Board
        The board after the slide and, when something moved, the spawn.
    score_gain : int
        Sum of the values created by merges, 0 when nothing moved.
    moved : bool
        Whether any tile value changed position.
    game_over : bool
        Whether no move remains on the resulting board.
    won : bool
        Whether the resulting board holds a winning tile.
    hints : tuple[RenderHint, ...]
        Merged and spawned tiles of the resulting board, in row-major order.
    """

    board: Board
    score_gain: int
    moved: bool
    game_over: bool
    won: bool
    hints: tuple[RenderHint, ...] = ()


@dataclass(frozen=True)
class GameState:
    """
    Session snapshot owned by the caller.

    Attributes
    ----------
    tiles : Board
        The current board.
    score : int
        Sum of all merged values so far.
    best_score : int
        Best score known to the session owner.
    is_game_over : bool
        Whether no move remains.
    is_won : bool
        Whether a winning tile is on the board.
    move_count : int
        Number of moves that changed the board.
    """

    tiles: Board
    score: int = 0
    best_score: int = 0
    is_game_over: bool = False
    is_won: bool = False
    move_count: int = 0


@dataclass(frozen=True)
class GameHistory:
    """Minimal snapshot a caller can keep to undo a move."""

    board: Board
    score: int


def render_hints(board: Board) -> tuple[RenderHint, ...]:
    """Collect the presentation hints of a board, in row-major order."""
    hints = []
    for i, row in enumerate(board):
        for j, tile in enumerate(row):
            if tile is None:
                continue
            if tile.is_new:
                hints.append(RenderHint(row=i, col=j, tile_id=tile.id, kind='new'))
            elif tile.is_merged:
                hints.append(RenderHint(row=i, col=j, tile_id=tile.id, kind='merged'))
    return tuple(hints)


def initialize_game_board(
    size: int = DEFAULT_SIZE, rng: Generator | None = None, factory: TileFactory | None = None
) -> Board:
    """
    Create a board of the given size holding two random tiles.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).
    rng : Generator, optional
        Random source for the spawns.
    factory : TileFactory, optional
        Factory used to allocate the tiles.

    Returns
    -------
    Board
        The new board.
    """
    return fill_cells(init_board(size), number_tile=INITIAL_TILES, rng=rng, factory=factory)


def initialize_game_state(
    size: int = DEFAULT_SIZE,
    best_score: int = 0,
    rng: Generator | None = None,
    factory: TileFactory | None = None,
) -> GameState:
    """
    Start a new session.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).
    best_score : int, optional
        Best score carried over by the session owner (default is 0).
    rng : Generator, optional
        Random source for the initial spawns.
    factory : TileFactory, optional
        Factory used to allocate the tiles.

    Returns
    -------
    GameState
        A fresh state with two tiles, a null score and no move played.
    """
    tiles = initialize_game_board(size, rng=rng, factory=factory)
    return GameState(tiles=tiles, score=0, best_score=best_score, is_game_over=False, is_won=False, move_count=0)


def play_move(
    board: Sequence[Sequence[Tile | None]],
    direction: Direction | str,
    rng: Generator | None = None,
    factory: TileFactory | None = None,
    target: int = WIN_VALUE,
) -> PlayResult:
    """
    Apply a full user move: slide, then spawn, then evaluate the terminal state.

    Parameters
    ----------
    board : Board
        The current board. It is left untouched.
    direction : Direction | str
        One of ``'up'``, ``'down'``, ``'left'`` or ``'right'``.
    rng : Generator, optional
        Random source for the spawn.
    factory : TileFactory, optional
        Factory used to allocate merged and spawned tiles.
    target : int, optional
        The winning value (default is 2048).

    Returns
    -------
    PlayResult
        The resulting board, score gain, whether it moved, terminal flags and render hints.

    Notes
    -----
    - If the slide changes nothing, no tile is spawned and the score gain is 0.
    - Moves on a finished board are not refused; stopping is up to the session owner.
    """
    result = move(board, direction, factory=factory)

    if not result.moved:
        return PlayResult(
            board=result.board,
            score_gain=0,
            moved=False,
            game_over=is_game_over(result.board),
            won=check_win(result.board, target=target),
        )

    spawned = spawn_tile(result.board, rng=rng, factory=factory)
    game_over = is_game_over(spawned)
    won = check_win(spawned, target=target)
    if game_over or won:
        logger.debug('Terminal board reached: game_over=%s, won=%s', game_over, won)

    return PlayResult(
        board=spawned,
        score_gain=result.score_gain,
        moved=True,
        game_over=game_over,
        won=won,
        hints=render_hints(spawned),
    )


def apply_play_result(state: GameState, result: PlayResult) -> GameState:
    """
    Advance a session with the outcome of ``play_move``.

    Parameters
    ----------
    state : GameState
        The current session state.
    result : PlayResult
        The outcome of the move played on ``state.tiles``.

    Returns
    -------
    GameState
        The next state, or ``state`` itself when nothing moved. ``best_score`` is never changed.
    """
    if not result.moved:
        return state
    return replace(
        state,
        tiles=result.board,
        score=state.score + result.score_gain,
        is_game_over=result.game_over,
        is_won=result.won,
        move_count=state.move_count + 1,
    )


def snapshot(state: GameState) -> GameHistory:
    """Keep the board and score of a state for a later undo."""
    return GameHistory(board=state.tiles, score=state.score)

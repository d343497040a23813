"""
Board-transition engine for a 2048-style sliding-tile merge puzzle.

Given a board of numbered tiles and a slide direction, the engine computes the resulting board,
the score earned, whether anything moved and whether the game has ended.
"""

from .core import (
    Board,
    Direction,
    MoveResult,
    Tile,
    TileFactory,
    boards_equal,
    can_move,
    check_win,
    clone_board,
    init_board,
    is_game_over,
    move,
    spawn_tile,
)
from .game import (
    GameHistory,
    GameState,
    PlayResult,
    RenderHint,
    apply_play_result,
    initialize_game_board,
    initialize_game_state,
    play_move,
    snapshot,
)
from .utils import board_to_string, calculate_stats, format_score, get_max_tile

__all__ = [
    "Board",
    "Direction",
    "GameHistory",
    "GameState",
    "MoveResult",
    "PlayResult",
    "RenderHint",
    "Tile",
    "TileFactory",
    "apply_play_result",
    "board_to_string",
    "boards_equal",
    "calculate_stats",
    "can_move",
    "check_win",
    "clone_board",
    "format_score",
    "get_max_tile",
    "init_board",
    "initialize_game_board",
    "initialize_game_state",
    "is_game_over",
    "move",
    "play_move",
    "snapshot",
    "spawn_tile",
]

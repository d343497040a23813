"""
Core board-transition logic of the sliding-tile merge game.

It includes the tile model, the one-dimensional slide-and-merge, directional moves, random tile
spawning and the terminal-state predicates.
"""

from .gameboard import (
    DEFAULT_SIZE,
    WIN_VALUE,
    Board,
    board_from_values,
    board_values,
    boards_equal,
    can_move,
    check_win,
    clone_board,
    count_non_empty_tiles,
    get_empty_positions,
    init_board,
    is_game_over,
)
from .gamemove import Direction, MoveResult, move
from .line import compress, merge, transform_line
from .spawn import INITIAL_TILES, TILE_SPAWN_PROBS, fill_cells, spawn_tile
from .tile import Tile, TileFactory, generate_tile_id

__all__ = [
    "DEFAULT_SIZE",
    "INITIAL_TILES",
    "TILE_SPAWN_PROBS",
    "WIN_VALUE",
    "Board",
    "Direction",
    "MoveResult",
    "Tile",
    "TileFactory",
    "board_from_values",
    "board_values",
    "boards_equal",
    "can_move",
    "check_win",
    "clone_board",
    "compress",
    "count_non_empty_tiles",
    "fill_cells",
    "generate_tile_id",
    "get_empty_positions",
    "init_board",
    "is_game_over",
    "merge",
    "move",
    "spawn_tile",
    "transform_line",
]

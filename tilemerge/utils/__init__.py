"""
Helpers for inspecting boards as text and as summary statistics.
"""

from .helpers import (
    BoardStats,
    board_to_string,
    calculate_stats,
    format_score,
    get_max_tile,
    get_occupied_positions,
    get_tile_count,
    get_tiles_flat,
)

__all__ = [
    "BoardStats",
    "board_to_string",
    "calculate_stats",
    "format_score",
    "get_max_tile",
    "get_occupied_positions",
    "get_tile_count",
    "get_tiles_flat",
]

"""
One-dimensional slide-and-merge of a single row or column.

Every line is oriented so that tiles slide toward index 0; the move engine takes care of
reversing and transposing the board so that all four directions reduce to this case.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from tilemerge.core.tile import Tile, TileFactory, default_factory

Line = tuple[Tile | None, ...]


def compress(line: Sequence[Tile | None]) -> Line:
    """
    Slide every tile of a line toward index 0.

    Parameters
    ----------
    line : Sequence[Tile | None]
        A row or a column of the board.

    Returns
    -------
    Line
        The tiles in their original order, right-padded with empty slots to the input length.

    Notes
    -----
    - Tiles are kept as-is (same objects), only empty slots move.
    - Compressing an already compressed line returns an equal line.
    """
    tiles = [tile for tile in line if tile is not None]
    return tuple(tiles) + (None,) * (len(line) - len(tiles))


def merge(line: Sequence[Tile | None], factory: TileFactory | None = None) -> tuple[Line, int]:
    """
    Merge adjacent equal tiles of a compressed line, once per pair.

    Parameters
    ----------
    line : Sequence[Tile | None]
        A compressed row or column.
    factory : TileFactory, optional
        Factory used to allocate merged tiles (default is the process-wide factory).

    Returns
    -------
    merged_line : Line
        The line after merging. Consumed slots are left empty.
    score : int
        The sum of the values of all tiles created by merging.

    Notes
    -----
    - A tile produced by a merge is never merged again in the same pass, so ``[2, 2, 2, 2]``
      gives ``[4, _, 4, _]`` and not ``[8, ...]``.
    - Surviving tiles keep their identifier; their transient flags are cleared.
    """
    factory = factory or default_factory()
    result: list[Tile | None] = []
    score = 0

    for i, current in enumerate(line):
        if current is None:
            result.append(None)
            continue

        # ##: Combine with the tile just written on the left, unless it was merged already.
        previous = result[i - 1] if i > 0 else None
        if previous is not None and not previous.is_merged and previous.value == current.value:
            merged = factory.create(previous.value * 2, is_merged=True)
            score += merged.value
            result[i - 1] = merged
            result.append(None)
        else:
            result.append(replace(current, is_new=False, is_merged=False))

    return tuple(result), score


def transform_line(line: Sequence[Tile | None], factory: TileFactory | None = None) -> tuple[Line, int]:
    """
    Slide a line toward index 0 and merge its tiles.

    Parameters
    ----------
    line : Sequence[Tile | None]
        A row or a column of the board, oriented toward index 0.
    factory : TileFactory, optional
        Factory used to allocate merged tiles.

    Returns
    -------
    final_line : Line
        The compressed line after merging.
    score : int
        The score earned by the merges of this line.
    """
    merged, score = merge(compress(line), factory=factory)
    return compress(merged), score

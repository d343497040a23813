"""
Tile model and tile allocation for the sliding-tile merge game.
"""

from dataclasses import dataclass
from itertools import count


@dataclass(frozen=True)
class Tile:
    """
    A single numbered piece of the board.

    Attributes
    ----------
    id : str
        Opaque identifier, unique among all tiles created in the process.
    value : int
        Power of two, at least 2.
    is_new : bool
        Presentation hint: the tile was spawned by the last transition.
    is_merged : bool
        Presentation hint: the tile was produced by a merge in the last transition.
    """

    id: str
    value: int
    is_new: bool = False
    is_merged: bool = False


class TileFactory:
    """
    Allocate tiles with identifiers that are never reused.

    Every factory draws an instance number from a class-level counter, so identifiers stay unique
    across factories of the same process, even when they share a prefix.

    Parameters
    ----------
    prefix : str, optional
        Prefix of every generated identifier (default is ``'tile'``).
    """

    # ##>: Instance numbers shared by all factories.
    _instances = count(1)

    def __init__(self, prefix: str = 'tile'):
        self.prefix = prefix
        self._instance = next(TileFactory._instances)
        self._counter = count(1)

    def next_id(self) -> str:
        """Return a fresh identifier."""
        return f'{self.prefix}-{self._instance}-{next(self._counter)}'

    def create(self, value: int, is_new: bool = False, is_merged: bool = False) -> Tile:
        """
        Create a tile with a fresh identifier.

        Parameters
        ----------
        value : int
            The value of the tile.
        is_new : bool, optional
            Whether the tile was just spawned.
        is_merged : bool, optional
            Whether the tile results from a merge.

        Returns
        -------
        Tile
            The new tile.
        """
        return Tile(id=self.next_id(), value=value, is_new=is_new, is_merged=is_merged)


# ##>: Shared factory used when callers do not supply their own.
_DEFAULT_FACTORY = TileFactory()


def default_factory() -> TileFactory:
    """Return the process-wide tile factory."""
    return _DEFAULT_FACTORY


def generate_tile_id() -> str:
    """Return a fresh identifier from the process-wide tile factory."""
    return _DEFAULT_FACTORY.next_id()

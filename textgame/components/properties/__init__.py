"""Property component aggregates.

Home of :class:`Player` and :class:`Position`. Both are frozen; a moved
player is a fresh ``Player`` built with :meth:`Player.moved_to`.
"""

from .player import Player
from .position import Position

__all__ = [
    "Player",
    "Position",
]

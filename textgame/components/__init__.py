"""textgame.components
=====================

The player's value objects: who is playing (:class:`Player`) and which cell
they occupy (:class:`Position`)::

    from textgame.components import Player, Position

A move never edits a player; it builds a copy with a new position and hands
it to :func:`textgame.utils.grid.place`.
"""

from .properties import Player, Position

__all__ = [
    "Player",
    "Position",
]

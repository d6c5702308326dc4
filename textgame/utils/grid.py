"""Bounds checks for player moves.

A move is only committed through :func:`place`. Callers build the moved
player and pass it in; an off-grid position comes back as
:class:`textgame.errors.InvalidDirection` and the old world stays current.
"""

import logging
from dataclasses import replace

from textgame.components import Player, Position
from textgame.errors import InvalidDirection
from textgame.grid import Grid
from textgame.state import World

logger = logging.getLogger(__name__)


def is_in_bounds(grid: Grid, pos: Position) -> bool:
    """Whether ``pos`` names a real cell: both coordinates in ``[0, grid.size)``."""
    return 0 <= pos.x < grid.size and 0 <= pos.y < grid.size


def place(world: World, player: Player) -> World:
    """Return ``world`` with ``player`` swapped in.

    Args:
        world (World): Current world; never modified.
        player (Player): Candidate player, usually a moved copy.

    Returns:
        World: New world holding ``player``.

    Raises:
        InvalidDirection: If the player's position is outside the grid.
    """
    if not is_in_bounds(world.grid, player.position):
        logger.debug(
            "Rejected placement of %s at (%d,%d): outside %dx%d grid",
            player.name,
            player.position.x,
            player.position.y,
            world.grid.size,
            world.grid.size,
        )
        raise InvalidDirection()
    return replace(world, player=player)
